import logging

import uvicorn

from hotcache.api import create_app
from hotcache.config import load_settings


def serve():
    """
    Main entry point for the hotcache HTTP service.
    """
    # 1. Load configuration (.env + environment)
    settings = load_settings()

    # 2. Setup Logging
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - [HotCache] - %(levelname)s - %(message)s'
    )
    logging.info("Starting hotcache service...")

    # 3. Build the registry with the preconfigured caches
    manager = settings.build_manager()
    logging.info(f"Cache manager initialized with {len(manager)} cache(s).")

    # 4. Serve the HTTP facade
    app = create_app(manager=manager, settings=settings)
    logging.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == '__main__':
    try:
        serve()
    except KeyboardInterrupt:
        pass
