"""
Startup script for the Portfolio API
Reads PORT/HOST from environment and starts uvicorn server
"""
import uvicorn
from portfolio_api.core.config import settings
from portfolio_api.main import app

if __name__ == "__main__":
    print(f"🚀 Starting Portfolio API server...")
    print(f"📍 Binding to {settings.host}:{settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info"
    )
