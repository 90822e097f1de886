import uvicorn

from foodcoach.api.api_run import app
from foodcoach.utilities.config import APP_HOST, APP_PORT
from foodcoach.utilities.network import LOOPBACK, get_local_ip


if __name__ == "__main__":
    local_url = f"http://localhost:{APP_PORT}"
    local_ip = get_local_ip()
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Food coach API running on {local_url} (Press CTRL+C to quit)")
    if local_ip != LOOPBACK:
        print(f"Accessible from other devices at: http://{local_ip}:{APP_PORT}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
