"""
SeedPattern — Flask entrypoint
"""

import logging
import os
from flask import Flask
from src.api.routes import bp as api_bp

DEFAULT_PORT = 3000

app = Flask(__name__)
app.register_blueprint(api_bp)


def resolve_port(environ=None) -> int:
    environ = os.environ if environ is None else environ
    try:
        return int(environ.get("PORT") or DEFAULT_PORT)
    except ValueError:
        return DEFAULT_PORT


def main():
    logging.basicConfig(level=logging.INFO)
    port = resolve_port()
    print(f"[SeedPattern] running at http://0.0.0.0:{port}")
    app.run(host="0.0.0.0", port=port, debug=False)


if __name__ == "__main__":
    main()
