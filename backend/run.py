#!/usr/bin/env python3
"""
City Weather Backend - Run Script
This script starts the FastAPI backend server
"""

import os
import sys
import subprocess
from pathlib import Path

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def check_file_exists(filepath, error_message):
    """Check if a file exists"""
    if not Path(filepath).exists():
        print_colored(f"❌ Error: {error_message}", "red")
        sys.exit(1)

def main():
    print_colored("🚀 Starting City Weather Backend...", "blue")

    # Check if we're in the backend directory
    check_file_exists("cityweather/main.py", "cityweather/main.py not found. Please run this script from the backend directory.")

    # .env is optional: every setting has an Open-Meteo default
    if not Path(".env").exists() and not Path("../.env").exists():
        print_colored("ℹ️  No .env file found, using defaults.", "yellow")
        print("Optional overrides:")
        print("  GEOCODING_URL=https://geocoding-api.open-meteo.com/v1/search")
        print("  FORECAST_URL=https://api.open-meteo.com/v1/forecast")
        print("  HTTP_TIMEOUT=5")
        print("  LOGGER=20")

    # Check if dependencies are installed
    print_colored("🔍 Checking dependencies...", "blue")
    try:
        import fastapi
        import uvicorn
        import httpx
    except ImportError:
        print_colored("❌ Dependencies not installed.", "red")
        print("Install them from the project root:")
        print("  pip install -e .")
        sys.exit(1)

    host = os.environ.get("HOST", "0.0.0.0")
    port = os.environ.get("PORT", "8000")

    print_colored("✅ All checks passed!", "green")
    print_colored("🌐 Starting Uvicorn server...", "blue")
    print(f"📍 Backend will be available at: http://localhost:{port}")
    print(f"📍 API Health check: http://localhost:{port}/health")
    print(f"📍 API Documentation: http://localhost:{port}/docs")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    # Run uvicorn with auto-reload for development
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "cityweather.main:app",
            "--reload",
            "--host", host,
            "--port", port
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
