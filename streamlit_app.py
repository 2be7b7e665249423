"""
All Colors — Gallery Edition

Run with:
    streamlit run streamlit_app.py
"""

from __future__ import annotations

import io
import time

import numpy as np
import streamlit as st
from PIL import Image, ImageDraw

from all_colors.config import GrowthConfig
from all_colors.engine import GrowthEngine
from all_colors.image_io import embellish
from all_colors.palette import palette_size
from all_colors.seeds import centre_seed, preset_seeds

# -- Page config -------------------------------------------------------
st.set_page_config(
    page_title="All Colors",
    page_icon=None,
    layout="wide",
    initial_sidebar_state="collapsed",
)

_DEFAULTS = GrowthConfig()
_LAYOUTS = {"Centre": 1, "Two seeds": 2, "Three seeds": 3, "Four seeds": 4}

# -- CSS ---------------------------------------------------------------
st.markdown("""
<style>
    @import url('https://fonts.googleapis.com/css2?family=Cormorant+Garamond:ital,wght@0,300;0,400;1,300&family=Inter:wght@200;300;400&display=swap');

    .stApp {
        background-color: #faf9f6;
        color: #2a2a2a;
        font-family: 'Inter', 'Helvetica Neue', sans-serif;
    }
    .block-container { max-width: 1000px; padding-top: 3.5rem; }

    .gallery-title {
        font-family: 'Cormorant Garamond', 'Georgia', serif;
        font-size: 2.8rem;
        font-weight: 300;
        text-align: center;
        border-bottom: 1px solid #1a1a1a;
        padding-bottom: 0.6rem;
        margin-bottom: 0.5rem;
    }
    .gallery-subtitle {
        font-size: 0.75rem;
        font-weight: 300;
        line-height: 1.8;
        margin-bottom: 3rem;
    }
    .catalogue-detail {
        font-size: 0.75rem;
        letter-spacing: 0.08em;
        text-transform: uppercase;
        text-align: center;
        margin-bottom: 2rem;
    }
    .stButton > button, .stDownloadButton > button {
        border-radius: 0px !important;
        border: 1px solid #2a2a2a !important;
        letter-spacing: 0.10em;
        text-transform: uppercase;
        font-size: 0.6rem;
    }
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
    header {visibility: hidden;}
</style>
""", unsafe_allow_html=True)


# -- Helpers -----------------------------------------------------------

def _add_passepartout(img: Image.Image, border: int = 20) -> Image.Image:
    w, h = img.size
    bg = (250, 249, 246)
    canvas = Image.new("RGB", (w + border * 2, h + border * 2), bg)
    canvas.paste(img, (border, border))
    draw = ImageDraw.Draw(canvas)
    draw.rectangle(
        [border - 1, border - 1, border + w, border + h],
        outline=(224, 222, 216), width=1,
    )
    return canvas


# -- Title -------------------------------------------------------------
st.markdown('<div class="gallery-title">All Colors</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="gallery-subtitle">'
    "A palette of evenly spaced colours is shuffled and sorted by hue, then "
    "placed one by one, each at the open border pixel whose painted "
    "neighbours match it best. Every colour is used exactly once."
    "</div>",
    unsafe_allow_html=True,
)

# -- Controls ----------------------------------------------------------
ctrl1, ctrl2, ctrl3 = st.columns(3)
with ctrl1:
    width = st.slider("Width (px)", 16, 256, 128)
    height = st.slider("Height (px)", 16, 256, 96)
with ctrl2:
    levels = st.select_slider("Colour levels", options=[4, 8, 16], value=16)
    layout = st.selectbox("Seeds", list(_LAYOUTS.keys()), index=2)
with ctrl3:
    seed = st.number_input("Seed", value=_DEFAULTS.seed, step=1)
    color_space = st.radio("Distance", ["rgb", "lab"], horizontal=True)
    upscale = st.slider("Upscale", 1, 8, 4)

n_colours = palette_size(levels)
st.caption(f"{n_colours:,} colours for {width * height:,} pixels")

# -- Grow --------------------------------------------------------------
if st.button("GROW", type="primary", use_container_width=True):
    count = _LAYOUTS[layout]
    seeds = (
        centre_seed(width, height)
        if count == 1
        else preset_seeds(count, width, height, arm=max(1, min(width, height) // 32))
    )
    cfg = GrowthConfig(
        width=width, height=height, seed=int(seed),
        colour_levels=levels, color_space=color_space,
    )
    engine = GrowthEngine.from_config(cfg, seeds)

    progress = st.progress(0.0, text="Growing ...")
    total = max(1, min(n_colours, width * height))
    t0 = time.perf_counter()
    for placement_no, _ in enumerate(engine.iter_placements(), 1):
        if placement_no % 256 == 0:
            progress.progress(min(1.0, placement_no / total), text="Growing ...")
    elapsed = time.perf_counter() - t0
    progress.empty()

    frame = embellish(np.array(engine.canvas.pixels()))
    display = Image.fromarray(frame).resize(
        (width * upscale, height * upscale), Image.NEAREST,
    )
    st.image(_add_passepartout(display, border=28), use_container_width=True)
    st.markdown(
        f'<div class="catalogue-detail">'
        f"{width} &times; {height}, {layout.lower()}, "
        f"{engine.placed:,} colours, seed {int(seed)}"
        f"</div>",
        unsafe_allow_html=True,
    )

    buf = io.BytesIO()
    display.save(buf, format="PNG")
    _, dl_col, _ = st.columns([1, 2, 1])
    with dl_col:
        st.download_button(
            "SAVE ART",
            data=buf.getvalue(),
            file_name="all_colors.png",
            mime="image/png",
            use_container_width=True,
        )

    m1, m2, m3 = st.columns(3)
    m1.metric("Placed", f"{engine.placed:,}")
    m2.metric("Unused", f"{len(engine.palette):,}")
    m3.metric("Time", f"{elapsed:.1f} s")
