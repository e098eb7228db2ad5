"""
Entry point for deployment.
Imports the FastAPI app from the sync_notes package.
"""

from sync_notes.config import settings
from sync_notes.main import app

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
