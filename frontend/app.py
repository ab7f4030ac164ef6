import streamlit as st
from weather_client import search_weather, get_presets, check_backend_health
from cards import status_html, current_card_html, day_card_html

PLACEHOLDER = "—"

# Page configuration
st.set_page_config(
    page_title="WeatherNow",
    page_icon="⛅",
    layout="wide"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        color: #1E88E5;
        text-align: center;
        padding: 1rem 0;
        font-weight: bold;
    }
    .status-line {
        color: #888;
        text-align: center;
        min-height: 1.5rem;
    }
    .now-card {
        padding: 1.5rem;
        border-radius: 0.75rem;
        background-color: #1c669c;
        color: white;
    }
    .now-temp {
        font-size: 3rem;
        font-weight: bold;
    }
    .day {
        padding: 1rem;
        border-radius: 0.5rem;
        background-color: #2b3a4a;
        color: white;
        text-align: center;
    }
    .dicon {
        font-size: 2rem;
    }
</style>
""", unsafe_allow_html=True)

# Initialize session state
if "presets" not in st.session_state:
    st.session_state.presets = get_presets()
    # Initial load searches the default city
    st.session_state.pending_city = st.session_state.presets["default_city"]

if "result" not in st.session_state:
    st.session_state.result = None

def blank_display() -> dict:
    return {
        "current": {key: PLACEHOLDER for key in ("place", "coords", "temperature", "icon", "summary", "humidity", "wind", "updated")},
        "daily": []
    }

def run_search(city: str):
    with st.spinner("Loading…"):
        response = search_weather(city)
    if "error" in response:
        response = {"query": city, "state": "ERROR", "status": f"⚠️ {response['error']}", "display": blank_display()}
    st.session_state.result = response

def render_current(current: dict):
    st.markdown(current_card_html(current), unsafe_allow_html=True)

def render_daily(cards: list):
    if not cards:
        return
    columns = st.columns(len(cards))
    for column, card in zip(columns, cards):
        with column:
            st.markdown(day_card_html(card), unsafe_allow_html=True)

# Header
st.markdown('<div class="main-header">⛅ WeatherNow</div>', unsafe_allow_html=True)

if not check_backend_health():
    st.warning("⚠️ Backend is not running. Please start the backend server first.")
    st.code("cd backend && uvicorn weathernow.main:app --reload", language="bash")

# Search form
with st.form("search-form", clear_on_submit=False):
    city_input = st.text_input("City", placeholder="Search a city…", label_visibility="collapsed")
    submitted = st.form_submit_button("Search")
if submitted and city_input.strip():
    st.session_state.pending_city = city_input.strip()

# Quick city chips
chips = st.columns(len(st.session_state.presets["presets"]))
for chip, city in zip(chips, st.session_state.presets["presets"]):
    if chip.button(city, key=f"chip_{city}", use_container_width=True):
        st.session_state.pending_city = city

if st.session_state.get("pending_city"):
    city = st.session_state.pending_city
    del st.session_state.pending_city
    run_search(city)

result = st.session_state.result
display = result["display"] if result else blank_display()

st.markdown(status_html(result["status"] if result else ""), unsafe_allow_html=True)
render_current(display["current"])
st.subheader("Forecast")
render_daily(display["daily"])

# Footer
st.divider()
st.markdown("""
<div style='text-align: center; color: #999; padding: 1rem;'>
    <small>Weather data by Open-Meteo | Made with Streamlit</small>
</div>
""", unsafe_allow_html=True)
