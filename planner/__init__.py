import logging

from flask import Flask, jsonify, request

from planner.config import PlannerConfig
from planner.exceptions import StorageWriteError, ValidationError
from planner.storage import AvailabilityRepository, JSONFileStorage

logger = logging.getLogger(__name__)


def build_repository(config: PlannerConfig | None = None) -> AvailabilityRepository:
    """Create a file-backed repository from config."""
    if config is None:
        config = PlannerConfig.from_env()
    return AvailabilityRepository(JSONFileStorage(config.data_file))


def create_app(repository: AvailabilityRepository | None = None):
    app = Flask(__name__)
    if repository is None:
        repository = build_repository()

    @app.route("/api/users", methods=["GET"])
    def get_all_users():
        return jsonify({"users": repository.get_all_users()})

    @app.route("/api/users/<name>/availability", methods=["GET"])
    def get_user_availability(name):
        return jsonify({"user": name, "dates": repository.get_user_availability(name)})

    @app.route("/api/users/<name>/availability", methods=["PUT"])
    def save_user_availability(name):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict) or not isinstance(payload.get("dates"), list):
            return ("Expected a JSON object with a 'dates' list", 400)

        try:
            repository.save_user_availability(name, payload["dates"])
        except ValidationError as e:
            return (str(e), 400)
        except StorageWriteError as e:
            logger.error(f"Save failed for {name}: {e}")
            return jsonify({"status": "error", "message": str(e)}), 500

        return jsonify({"status": "success", "message": "Saved to shared calendar"})

    @app.route("/api/summary", methods=["GET"])
    def get_summary():
        summary = repository.get_summary()
        return jsonify(
            {
                "entries": [entry.model_dump() for entry in summary.entries],
                "best_count": summary.best_count,
                "best_dates": summary.best_dates,
            }
        )

    return app
