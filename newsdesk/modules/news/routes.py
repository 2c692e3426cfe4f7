"""
News API Routes
===============

Thin HTTP layer over news.service. Stores are taken from the NewsDesk
extension registered on the app.
"""

from flask import current_app, jsonify, request
from . import news_bp
from .service import list_news, get_news, create_news, delete_news
from ...core.errors import NewsDeskError, NotFound, StorageError
from ...core.logging_service import LoggingService
from ...core.models import NewsForm


def _stores():
    ext = current_app.extensions['newsdesk']
    return ext.store, ext.uploads


def _base_url():
    """scheme://host of the current request"""
    return f"{request.scheme}://{request.host}"


@news_bp.route('', methods=['GET'])
def get_all_news():
    store, _ = _stores()
    return jsonify(list_news(store, _base_url()))


@news_bp.route('/<news_id>', methods=['GET'])
def get_news_item(news_id):
    store, _ = _stores()
    try:
        return jsonify(get_news(store, news_id, _base_url()))
    except NotFound:
        return jsonify({'error': 'Not found'}), 404


@news_bp.route('', methods=['POST'])
def create_news_item():
    store, uploads = _stores()
    try:
        form = NewsForm.from_form(request.form)
        item = create_news(store, uploads, form, request.files.get('image'))
    except StorageError as e:
        LoggingService.error('news', 'Failed to save news item', {'error': str(e)})
        return jsonify({'success': False, 'message': e.message}), 500
    except NewsDeskError as e:
        LoggingService.log_api_call('news', request.path, 'POST', e.status_code, {'error': e.message})
        return jsonify({'success': False, 'message': e.message}), e.status_code

    LoggingService.log_api_call('news', request.path, 'POST', 200, {'id': item['id']})
    return jsonify({'success': True, 'news': item})


@news_bp.route('/<news_id>', methods=['DELETE'])
def delete_news_item(news_id):
    store, uploads = _stores()
    try:
        delete_news(store, uploads, news_id)
    except NotFound:
        return jsonify({'success': False, 'message': 'Not found'}), 404
    except StorageError as e:
        LoggingService.error('news', f"Failed to delete news item {news_id}", {'error': str(e)})
        return jsonify({'success': False}), 500

    LoggingService.log_api_call('news', request.path, 'DELETE', 200)
    return jsonify({'success': True})
