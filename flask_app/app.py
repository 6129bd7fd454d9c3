"""Flask application for pasting data and getting chart parameters back."""

from flask import Flask, jsonify, request
from loguru import logger

from chartgen.config import FLASK_CONFIG
from chartgen.core.pipeline import ChartPipeline, ChartState
from chartgen.imagegen import ImageGenerationClient
from chartgen.utils.chart_generators import ChartGenerators
from chartgen.utils.data_processors import DataProcessors
from chartgen.utils.error_handler import (
    ConfigurationError,
    ErrorHandler,
    ImageGenerationError,
    InvalidChartKindError,
)
from chartgen.utils.log_config import configure_logging


def create_app(
    pipeline: ChartPipeline | None = None,
    image_client: ImageGenerationClient | None = None,
) -> Flask:
    """
    Build the Flask app.

    Args:
        pipeline: Chart pipeline (a cached one is created when omitted)
        image_client: Image generation client (created when omitted)

    Returns:
        Configured Flask application

    """
    app = Flask(__name__)
    # Record field order is meaningful
    app.json.sort_keys = False
    app.config["PIPELINE"] = pipeline or ChartPipeline()
    app.config["IMAGE_CLIENT"] = image_client or ImageGenerationClient()

    @app.route("/health")
    def health():
        """Liveness probe."""
        return jsonify({"status": "ok"})

    @app.route("/api/chart", methods=["POST"])
    def chart():
        """Parse pasted data and return schema, render descriptor and figure."""
        body = request.get_json(silent=True) or {}
        data = body.get("data", "")
        chart_type = body.get("chartType", "bar")

        if not isinstance(data, str) or not data.strip():
            return jsonify({"success": False, "error": "Data is required"}), 400

        logger.info(f"Chart request: {chart_type}, {len(data)} chars")

        try:
            result = app.config["PIPELINE"].run(
                ChartState(raw_text=data, chart_kind=chart_type)
            )
        except InvalidChartKindError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        if not result.renderable:
            return jsonify({"success": False, "error": "Could not parse data"}), 422

        figure, error = ErrorHandler.safe_execute_with_default(
            ChartGenerators.build_figure,
            None,
            result.records,
            result.descriptor,
            error_message_prefix="Figure generation failed",
        )

        summary, summary_error = ErrorHandler.safe_execute_with_default(
            DataProcessors.analyze_records,
            None,
            result.records,
            error_message_prefix="Record analysis failed",
        )

        response = result.to_dict()
        response["success"] = True
        response["figure"] = figure
        response["summary"] = summary
        if error:
            response["figure_error"] = error
        if summary_error:
            response["summary_error"] = summary_error
        return jsonify(response)

    @app.route("/api/generate", methods=["POST"])
    def generate():
        """Generate an AI chart image for pasted data."""
        body = request.get_json(silent=True) or {}
        data = body.get("data")
        chart_type = body.get("chartType")

        if not data or not chart_type:
            return jsonify({"error": "Data and chartType are required"}), 400

        try:
            image = app.config["IMAGE_CLIENT"].generate(data, chart_type)
        except ConfigurationError as e:
            logger.error(f"Image generation not configured: {e}")
            return jsonify({"error": str(e)}), 500
        except ImageGenerationError as e:
            logger.error(f"Error generating chart: {e}")
            return jsonify({"error": str(e) or "Failed to generate chart"}), 500

        return jsonify({"image": image})

    return app


if __name__ == "__main__":
    configure_logging(FLASK_CONFIG["log_level"])
    logger.info("Starting Flask chartgen application")
    create_app().run(debug=FLASK_CONFIG["debug"], port=FLASK_CONFIG["port"])
