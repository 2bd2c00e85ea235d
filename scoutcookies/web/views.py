# scoutcookies/web/views.py
"""Server-rendered screens. Data is loaded by the pages from the JSON API."""
from flask import Response, current_app, render_template, url_for

from . import bp
from ..catalog import COOKIE_TYPES
from ..qr import render_png


@bp.get("/")
def login_page():
    return render_template("login.html")


@bp.get("/dashboard")
def dashboard_page():
    return render_template("dashboard.html")


@bp.get("/scan")
def scan_page():
    return render_template("scan.html")


@bp.get("/order/<order_id>")
def order_page(order_id):
    return render_template("order.html", order_id=order_id, cookies=COOKIE_TYPES)


@bp.get("/payment/<order_id>")
def payment_page(order_id):
    return render_template(
        "payment.html",
        order_id=order_id,
        publishable_key=current_app.config["STRIPE_PUBLISHABLE_KEY"],
    )


@bp.get("/payment/<order_id>/qr.png")
def payment_qr(order_id):
    # buyer scans this to open the payment screen on their own phone
    url = url_for("web.payment_page", order_id=order_id, method="qr", _external=True)
    return Response(render_png(url, scale=6), mimetype="image/png")
