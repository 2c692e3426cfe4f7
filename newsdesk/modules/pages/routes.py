from flask import current_app, send_from_directory
from . import pages_bp


def _site_root():
    return current_app.config['SITE_ROOT']


@pages_bp.route('/')
@pages_bp.route('/website')
def website():
    """Public homepage"""
    return send_from_directory(_site_root(), 'index.html')


@pages_bp.route('/admin')
def admin():
    """News admin page"""
    return send_from_directory(_site_root(), 'admin.html')


@pages_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)


@pages_bp.route('/<path:filename>')
def site_asset(filename):
    return send_from_directory(_site_root(), filename)
