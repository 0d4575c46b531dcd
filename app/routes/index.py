# app/routes/index.py
# (Landing page and the register / login / logout routes.)

from flask import Blueprint, request, render_template, redirect, url_for, flash
from flask_login import login_user, logout_user, current_user
from app.services.users import register_user, authenticate
from app.utils import is_safe_redirect

bp = Blueprint('index', __name__)

@bp.route('/', methods=['GET'])
def landing():
    return render_template('landing.html')

@bp.route('/register', methods=['GET'])
def register_form():
    return render_template('register.html')

@bp.route('/register', methods=['POST'])
def register():
    """Creates the account and logs the new user straight in."""
    result = register_user(request.form.get('username'), request.form.get('password'))

    if not result.get("success"):
        flash(result["error"], 'error')
        return redirect(url_for('index.register_form'))

    login_user(result["user"])
    flash(result["message"], 'success')
    return redirect(url_for('campgrounds.index'))

@bp.route('/login', methods=['GET'])
def login_form():
    return render_template('login.html', next=request.args.get('next'))

@bp.route('/login', methods=['POST'])
def login():
    user = authenticate(request.form.get('username'), request.form.get('password'))

    if user is None:
        flash("Invalid username or password", 'error')
        return redirect(url_for('index.login_form'))

    login_user(user)
    flash(f"Welcome back {user.username}", 'success')

    target = request.form.get('next') or request.args.get('next')
    if is_safe_redirect(target):
        return redirect(target)
    return redirect(url_for('campgrounds.index'))

@bp.route('/logout', methods=['GET'])
def logout():
    if current_user.is_authenticated:
        logout_user()
        flash("Logged you out!", 'success')
    return redirect(url_for('campgrounds.index'))
