# app.py
# Streamlit UI for the nearest-neighbor tour builder
# Run: streamlit run app.py

import os
import tempfile
from typing import List

import streamlit as st

import config
from load_tsp import TSPFileError, load_cities, random_cities
from nearest_neighbor import TourError, nearest_neighbor_tour
from point import Node
from tour import tour_edges
from visualize_tour import plot_tour

@st.cache_data(show_spinner=False)
def load_uploaded(data: bytes) -> List[Node]:
    # the parser reads from a path, so spill the upload to a temp file
    fd, path = tempfile.mkstemp(suffix=".tsp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        return load_cities(path)
    finally:
        os.remove(path)

@st.cache_data(show_spinner=False)
def load_sample() -> List[Node]:
    return load_cities(config.SAMPLE_TSP_FILE)

def edge_rows(tour):
    return [
        {"from": u.id, "to": v.id, "weight": round(w, 4)}
        for u, v, w in tour_edges(tour)
    ]

# app UI

st.set_page_config(**config.STREAMLIT_CONFIG)

st.title(f"🧭 {config.UI_TEXT['app_title']}")
st.write(config.UI_TEXT['tagline'])

with st.sidebar:
    st.header("⚙️ Cities")
    source = st.radio("Source", ["Sample file", "Upload .tsp", "Random"], index=0)
    uploaded = None
    if source == "Upload .tsp":
        uploaded = st.file_uploader("TSPLIB file", type=["tsp", "txt"])
    elif source == "Random":
        n_cities = st.number_input("Number of cities", min_value=1, max_value=5000,
                                   value=config.RANDOM_SETTINGS['n_cities'])
        seed = st.number_input("Seed", min_value=0, value=config.RANDOM_SETTINGS['seed'])

try:
    if source == "Upload .tsp":
        if uploaded is None:
            st.info("Upload a .tsp file with a NODE_COORD_SECTION.")
            st.stop()
        cities = load_uploaded(uploaded.getvalue())
    elif source == "Random":
        cities = random_cities(int(n_cities), seed=int(seed))
    else:
        cities = load_sample()
except TSPFileError as e:
    st.error(str(e))
    st.stop()

colA, colB = st.columns([0.35, 0.65], gap="large")

with colA:
    st.subheader("📍 Start city")
    ids = [c.id for c in cities]
    default_idx = ids.index(config.DEFAULT_START_ID) if config.DEFAULT_START_ID in ids else 0
    start_id = st.selectbox("Start city id", ids, index=default_idx)
    run = st.button("🔎 Build tour", type="primary", use_container_width=True)
    st.caption(f"{len(cities)} cities loaded")

with colB:
    st.subheader("Tour")
    if run:
        try:
            with st.spinner("Running nearest neighbor..."):
                tour = nearest_neighbor_tour(cities, start_id)
        except TourError as e:
            st.error(str(e))
            st.stop()

        m1, m2 = st.columns(2)
        m1.metric("Total distance", f"{tour.total_distance:.2f}")
        m2.metric("Cities", len(cities))

        st.pyplot(plot_tour(cities, tour))

        with st.expander("📌 Edges"):
            st.dataframe(edge_rows(tour), use_container_width=True)
    else:
        st.write("Pick a start city and press **Build tour**.")
