"""
Quick launcher for the webhook server
"""
import os
import uvicorn

from config.settings import settings


def main():
    """Launch the FastAPI webhook with uvicorn"""
    # Ensure we're in the right directory so `webhook_app` imports
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)

    print("Starting brand kit webhook...")
    print(f"POST submissions to http://{settings.HOST}:{settings.PORT}/api/ghl-webhook")
    uvicorn.run("webhook_app:app", host=settings.HOST, port=settings.PORT, reload=False)


if __name__ == "__main__":
    main()
