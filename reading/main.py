import logging

import uvicorn
from reading.api.api_run import app
from reading.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Reading plans API on http://localhost:{APP_PORT}/api/reading (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
