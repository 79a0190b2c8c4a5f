import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from cityweather.core.errors import WeatherAppError
from cityweather.core.logger import logs
from cityweather.models.weather_model import ErrorResponse
from cityweather.routes.weather_route import router as weather_router

app = FastAPI(title="City Weather")
app.include_router(weather_router)

# --- Error mapping ---
@app.exception_handler(WeatherAppError)
async def weather_error_handler(request: Request, exc: WeatherAppError):
    logs.log(logging.WARNING, f"{exc.kind.value} error on {request.url.path}: {exc.message}")
    body = ErrorResponse(error=exc.kind, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to City Weather API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "weather": "/weather?city=<name>&fahrenheit=<bool>",
            "summary": "/weather/summary?city=<name>&fahrenheit=<bool>",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "City Weather"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("cityweather.main:app", host="0.0.0.0", port=8000, reload=True)
