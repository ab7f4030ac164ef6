from fastapi import FastAPI
from weathernow.routes.weather_route import router as weather_router

app = FastAPI(title="WeatherNow")
app.include_router(weather_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to WeatherNow API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "search": "/weather/search?city=<name>",
            "presets": "/weather/presets",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "WeatherNow"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("weathernow.main:app", host="0.0.0.0", port=8000, reload=True)
