if __name__ == "__main__":
    import logging
    import os
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    reload_enabled = os.environ.get("ELEVENLABS_DEMO_RELOAD") == "1"

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=reload_enabled,
    )
