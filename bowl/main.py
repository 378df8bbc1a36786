import logging

import uvicorn
from bowl.api.api_run import app
from bowl.utilities.config import APP_HOST, APP_PORT, DATA_DIR, effective_log_level


if __name__ == "__main__":
    logging.basicConfig(level=effective_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url = f"http://localhost:{APP_PORT}"
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    print(f"Using data directory: {DATA_DIR}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
