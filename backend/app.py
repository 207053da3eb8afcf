# backend/app.py
from flask import Flask, request, jsonify
from flask_cors import CORS

from backend.config import Settings, setup_logging
from backend.errors import FactsError
from backend.facts import create_fact, get_facts
from backend.facts_store import FactStore


def create_app(settings: Settings | None = None, store: FactStore | None = None) -> Flask:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    if not settings.x_token:
        raise RuntimeError("X_TOKEN environment variable not set")
    store = store or FactStore(settings.facts_path)

    app = Flask(__name__)

    CORS(
        app,
        resources={r"/*": {"origins": settings.allowed_origins}},
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "x-token"],
        max_age=86400,
    )

    @app.errorhandler(FactsError)
    def facts_error(e: FactsError):
        return jsonify({"detail": e.detail}), e.status_code

    # Preflight: reply fast so browser proceeds to real request
    @app.route("/<path:_any>", methods=["OPTIONS"])
    def options_ok(_any):
        return ("", 204)

    @app.get("/health")
    def health():
        return jsonify({"ok": True, "facts_path": str(store.path), "exists": store.exists()})

    @app.get("/v1/facts/<int(signed=True):count>")
    def random_facts(count: int):
        return jsonify({"facts": get_facts(store, count)})

    @app.post("/v1/facts/new")
    def new_fact():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        fact = create_fact(
            store,
            payload.get("description"),
            request.headers.get("x-token"),
            settings.x_token,
        )
        app.logger.info("new fact from %s", request.remote_addr)
        return jsonify({"description": fact.description})

    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    app = create_app(settings)
    app.run(host="0.0.0.0", port=settings.port, debug=False)
