import logging
from typing import Optional

from flask import Blueprint, Flask, request, jsonify, render_template
from flask_cors import CORS
from pydantic import ValidationError
from werkzeug.exceptions import MethodNotAllowed

from config.env import ServerConfig
from models.request import GreetRequest
from models.response import DataResponse, ErrorResponse, GreetResponse
from utils.time_utils import iso_timestamp, local_time_string

logger = logging.getLogger(__name__)

DATA_MESSAGE = "Hello from the Flask server!"
INVALID_REQUEST = "Invalid request"

# Methods outside this list reach the page through the 405 handler in create_app.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]

ui = Blueprint("ui", __name__)


def _format_validation_error(err: ValidationError) -> str:
    details = err.errors() or []
    if not details:
        return "Invalid body"
    first = details[0]
    loc = ".".join(str(item) for item in first.get("loc", ()))
    msg = first.get("msg", "Invalid body")
    return f"{loc}: {msg}" if loc else msg


@ui.route("/", defaults={"path": ""}, methods=ALL_METHODS)
@ui.route("/<path:path>", methods=ALL_METHODS)
def index(path: str = ""):
    """Serve the demo page for any route not claimed by the API."""
    return render_template("index.html")


@ui.route("/api/data", methods=ALL_METHODS)
def api_data():
    if request.method != "GET":
        return index()

    response = DataResponse(message=DATA_MESSAGE, timestamp=iso_timestamp())
    return jsonify(response.model_dump())


@ui.route("/api/greet", methods=ALL_METHODS)
def api_greet():
    """Greet the submitted name with the server's local time."""
    if request.method != "POST":
        return index()

    try:
        req = GreetRequest.model_validate_json(request.get_data())
    except ValidationError as e:
        logger.debug("Rejected greet body: %s", _format_validation_error(e))
        error_resp = ErrorResponse(error=INVALID_REQUEST)
        return jsonify(error_resp.model_dump()), 400

    name = str(req.name)
    greeting = f"Hello, {name}! The server received your name at {local_time_string()}"
    response = GreetResponse(greeting=greeting)
    return jsonify(response.model_dump())


def _page_for_unrouted_method(err: MethodNotAllowed):
    return render_template("index.html"), 200


def create_app(config: Optional[ServerConfig] = None) -> Flask:
    """Build the dispatcher for the given configuration."""
    config = config or ServerConfig()

    app = Flask(__name__)
    app.config["SERVER_CONFIG"] = config
    CORS(app, resources={r"/api/*": {"origins": config.frontend_origin}})
    app.register_blueprint(ui)
    app.register_error_handler(MethodNotAllowed, _page_for_unrouted_method)
    return app
