from flask import Blueprint

credit_bp = Blueprint('credit_bp', __name__)


from .credit import *
