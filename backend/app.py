from dataclasses import dataclass

from flask import Flask, jsonify
from flask_cors import CORS
import logging

GREETING_MESSAGE = "Hello, World from an automated pipeline!"


@dataclass(frozen=True)
class GreetingResponse:
    message: str


class CaseInsensitivePaths:
    """WSGI middleware that lower-cases the request path before routing"""

    def __init__(self, wsgi_app):
        self.wsgi_app = wsgi_app

    def __call__(self, environ, start_response):
        environ['PATH_INFO'] = environ.get('PATH_INFO', '').lower()
        return self.wsgi_app(environ, start_response)


app = Flask(__name__)
CORS(app)  # Enable CORS for frontend communication
app.wsgi_app = CaseInsensitivePaths(app.wsgi_app)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_greeting():
    """Build the fixed greeting payload"""
    return GreetingResponse(message=GREETING_MESSAGE)


@app.route('/greeting', methods=['GET'])
def greeting():
    """GET API that returns the pipeline greeting message"""
    return jsonify(build_greeting())


if __name__ == '__main__':
    logger.info("Starting greeting service on port 5000")
    app.run(host='0.0.0.0', port=5000, debug=False)
