from flask import Blueprint, Response, current_app, jsonify

from src.kernel.renderer import OutputFormat, generate_pattern
from src.kernel.seed_digest import hex_digest

bp = Blueprint("api", __name__, url_prefix="/")

FORMATS = [f.value for f in OutputFormat]

# ---------- pattern ----------
def seed_info(seed: str) -> dict:
    return {"seed": seed, "hash": hex_digest(seed), "imageUrl": f"/api/{seed}.png"}

@bp.route("/api/<seed>.<filetype>")
def pattern(seed, filetype):
    if filetype == "json":
        return jsonify(seed_info(seed))
    if filetype not in FORMATS:
        return jsonify({"error": "Unsupported file type"}), 400

    fmt = OutputFormat(filetype)
    try:
        body = generate_pattern(seed, fmt)
    except Exception:
        current_app.logger.exception("Error generating pattern for seed %r", seed)
        return jsonify({"error": "Error generating pattern"}), 500
    return Response(body, mimetype=fmt.mimetype)
