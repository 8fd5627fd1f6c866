"""
Flask integration for the quantity codec.

create_app() builds a Flask application configured from config.py with the
codec registered for templates:

    {{ ingredient.quantity | fraction }}       display, snapped to common fractions
    {{ ingredient.quantity | fraction_text }}  exact text for the edit field
    {{ form_value | fraction_decimal }}        text back to a decimal amount
    {% if is_valid_fraction(form_value) %}     grammar check for error styling

Routes belong to the host application.
"""

from flask import Flask

from config import get_config
from services import amount_to_text, format_quantity, is_valid_fraction, parse_quantity


def register_filters(app):
    """Register Jinja filters for fraction display and entry."""
    tolerance = app.config['FRACTION_TOLERANCE']
    max_steps = app.config['FRACTION_MAX_ITERATIONS']
    max_length = app.config['QUANTITY_MAX_LENGTH']

    def fraction(value):
        if value is None:
            return ''
        return format_quantity(value, tolerance=tolerance, max_steps=max_steps)

    def fraction_text(value):
        return amount_to_text(value, tolerance=tolerance, max_steps=max_steps)

    def fraction_decimal(value):
        return parse_quantity(value, max_length=max_length)

    app.jinja_env.filters['fraction'] = fraction
    app.jinja_env.filters['fraction_text'] = fraction_text
    app.jinja_env.filters['fraction_decimal'] = fraction_decimal
    app.jinja_env.globals['is_valid_fraction'] = is_valid_fraction


def create_app(env=None):
    """Create the Flask application for the given environment name."""
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    app.logger.setLevel(app.config['LOG_LEVEL'])

    register_filters(app)
    app.logger.debug(
        "Fraction filters registered (tolerance=%s, max_steps=%s)",
        app.config['FRACTION_TOLERANCE'], app.config['FRACTION_MAX_ITERATIONS'],
    )
    return app


app = create_app()
