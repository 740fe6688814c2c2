from flask import Flask, request, jsonify, send_from_directory
from flask_cors import CORS
from loguru import logger

from applog import configure_logging
from mailer import MailDispatcher
from notifications import dispatch_order_notifications
from orders import ValidationFailure, parse_order
from settings import Settings

SUCCESS_MESSAGE = "Order confirmed and notifications sent!"
FAILURE_MESSAGE = "Failed to process order"


def create_app(settings=None, mailer=None):
    # ─── App setup ───────────────────────────────────────────────────────────
    settings = settings or Settings.from_env()
    mailer = mailer or MailDispatcher(settings)

    # front end lives in public/ and is served from the site root
    app = Flask(__name__, static_folder=settings.static_dir, static_url_path="")
    CORS(app)  # allow all origins

    def failure():
        return jsonify({"success": False, "message": FAILURE_MESSAGE}), 500

    # ─── POST /send-order-email ──────────────────────────────────────────────
    @app.route("/send-order-email", methods=["POST"])
    def send_order_email():
        data = request.get_json(force=True, silent=True)
        try:
            order = parse_order(data)
        except ValidationFailure as err:
            logger.warning("Rejected order submission: {}", err.detail)
            return failure()

        try:
            result = dispatch_order_notifications(order, mailer, settings)
        except Exception:
            logger.exception("Email error while processing order for {}", order.customer_email)
            return failure()

        if not result.ok:
            logger.error("Email error ({} notification): {}", result.failed_step, result.error.cause)
            return failure()

        logger.info("Order for {} pancakes confirmed, notified {}", order.pancakes, order.customer_email)
        return jsonify({"success": True, "message": SUCCESS_MESSAGE}), 200

    # ─── Front end ───────────────────────────────────────────────────────────
    @app.route("/")
    def index():
        return send_from_directory(app.static_folder, "index.html")

    # ─── Health check ────────────────────────────────────────────────────────
    @app.route("/healthz")
    def healthz():
        return "OK", 200

    return app


settings = Settings.from_env()
configure_logging(settings.log_level)
app = create_app(settings)

if __name__ == "__main__":
    logger.info("Server running on port {}", settings.port)
    app.run(host="0.0.0.0", port=settings.port)
