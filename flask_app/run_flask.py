#!/usr/bin/env python
"""Run the Flask application."""

from chartgen.config import FLASK_CONFIG
from chartgen.utils.log_config import configure_logging
from flask_app.app import create_app

app = create_app()

if __name__ == "__main__":
    configure_logging(FLASK_CONFIG["log_level"])
    app.run(debug=FLASK_CONFIG["debug"], port=FLASK_CONFIG["port"])
