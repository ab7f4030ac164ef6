import os
import requests

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")

# The preset list is owned by the backend (PRESET_CITIES); offline the page only offers the default city
DEFAULT_CITY = os.getenv("DEFAULT_CITY", "Kolkata")

def search_weather(city: str) -> dict:
    """Ask the backend for the display state of one search."""
    try:
        response = requests.get(
            f"{BACKEND_URL}/weather/search",
            params={"city": city},
            timeout=30
        )
        response.raise_for_status()
        return response.json()
    except requests.exceptions.ConnectionError:
        return {
            "error": "Cannot connect to backend. Make sure the backend is running on port 8000."
        }
    except requests.exceptions.Timeout:
        return {
            "error": "Request timed out. Please try again."
        }
    except requests.exceptions.RequestException as e:
        return {
            "error": f"An error occurred: {str(e)}"
        }

def get_presets() -> dict:
    """Default city and chip list; falls back to the built-in list if the backend is down."""
    try:
        response = requests.get(f"{BACKEND_URL}/weather/presets", timeout=5)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException:
        return {"default_city": DEFAULT_CITY, "presets": [DEFAULT_CITY]}

def check_backend_health() -> bool:
    """Check if backend is running."""
    try:
        response = requests.get(f"{BACKEND_URL}/health", timeout=2)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False
