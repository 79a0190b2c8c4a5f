import os

import requests
import streamlit as st

from cityweather.models.weather_model import TemperatureUnit
from cityweather.utils.formatting import format_optional, format_temperature

# Page configuration
st.set_page_config(
    page_title="City Weather",
    page_icon="🌤️",
    layout="centered",
)

# Custom CSS for the report cards
st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        color: #1E88E5;
        text-align: center;
        padding: 1rem 0;
        font-weight: bold;
    }
    .error-box {
        padding: 1rem;
        border-radius: 0.5rem;
        border-left: 4px solid #E53935;
        color: #E53935;
        margin: 1rem 0;
    }
    .day-card {
        padding: 0.5rem 0;
        border-bottom: 1px solid #333;
    }
</style>
""", unsafe_allow_html=True)

# Backend API configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")

def fetch_report(city: str, fahrenheit: bool) -> dict:
    """Call the backend; returns the report JSON or {"error": message}."""
    try:
        response = requests.get(
            f"{BACKEND_URL}/weather",
            params={"city": city, "fahrenheit": str(fahrenheit).lower()},
            timeout=30
        )
    except requests.exceptions.ConnectionError:
        return {"error": "Cannot connect to backend. Make sure the backend is running on port 8000."}
    except requests.exceptions.Timeout:
        return {"error": "Request timed out. Please try again."}

    if response.ok:
        return response.json()
    try:
        return {"error": response.json().get("message", response.text)}
    except ValueError:
        return {"error": f"Backend returned HTTP {response.status_code}"}

def show_condition(weather: dict | None):
    """Icon plus description; text only when there is no icon."""
    if not weather:
        return
    icon = weather.get("icon_ref")
    if icon:
        col_icon, col_text = st.columns([1, 8])
        col_icon.image(icon, width=32)
        col_text.write(weather["description"])
    else:
        st.write(weather["description"])

def display_report(report: dict):
    unit = TemperatureUnit(report["unit"])
    location = report["location"]
    current = report["current"]

    title = location["name"] + (f", {location['country']}" if location.get("country") else "")
    st.subheader(f"Current Weather for {title}")
    show_condition(current.get("weather"))
    st.write(f"**Temperature:** {format_temperature(current['temperature'], unit)}")
    st.write(f"**Wind Speed:** {format_optional(current['wind_speed_kmh'], ' km/h')}")
    st.write(f"**Humidity:** {format_optional(current.get('humidity_percent'), '%')}")
    st.write(f"**Precipitation:** {format_optional(current.get('precipitation_mm'), ' mm')}")

    st.divider()
    st.subheader(f"{len(report['forecast'])}-Day Forecast")
    for day in report["forecast"]:
        st.markdown(f"**{day['date']}**")
        show_condition(day["weather"])
        st.write(
            f"Max: {format_temperature(day['max_temp'], unit)}, "
            f"Min: {format_temperature(day['min_temp'], unit)}, "
            f"Precip: {format_optional(day.get('precipitation_sum_mm'), ' mm')}"
        )

# Header
st.markdown('<div class="main-header">🌤️ City Weather</div>', unsafe_allow_html=True)

with st.form("weather_form"):
    city_input = st.text_input("City", placeholder="e.g. Paris")
    use_fahrenheit = st.checkbox("Show temperatures in °F")
    submitted = st.form_submit_button("Get Weather")

if submitted:
    city = city_input.strip()
    if not city:
        st.markdown('<div class="error-box">Please enter a city name.</div>', unsafe_allow_html=True)
    else:
        with st.spinner("Fetching weather data..."):
            result = fetch_report(city.lower(), use_fahrenheit)

        if "error" in result:
            st.markdown(f'<div class="error-box">Error: {result["error"]}</div>', unsafe_allow_html=True)
        else:
            display_report(result)

# Footer
st.divider()
st.markdown("""
<div style='text-align: center; color: #999; padding: 1rem;'>
    <small>Powered by FastAPI & Open-Meteo | Icons by Icons8 | Made with Streamlit</small>
</div>
""", unsafe_allow_html=True)
