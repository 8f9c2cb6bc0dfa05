"""
Fantasy Grounds Unity Character Sheet Parser - Web Version
===========================================================
Flask web application for converting FGU XML character files to HTML.
Deploy on Vercel, Heroku, or any WSGI-compatible server.

Usage (Local):
    pip install .
    python -m fgusheet serve
"""

import logging
from io import BytesIO

from flask import Flask, jsonify, render_template_string, request, send_file, url_for
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename

from fgusheet import config
from fgusheet.convert import DocumentError, SheetError, generate_sheet
from fgusheet.templates import UPLOAD_PAGE

logger = logging.getLogger(__name__)

# Create Flask app - must be at module level for Vercel
app = Flask(__name__)
app.config.from_object(config)


def _error(message, status):
    return jsonify({'success': False, 'error': message}), status


def _wants_download():
    return request.args.get('download', '').lower() in ('1', 'true', 'yes')


@app.errorhandler(RequestEntityTooLarge)
def too_large(e):
    limit_mb = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
    logger.warning("Rejected upload larger than %dMB", limit_mb)
    return _error(f'File too large (max {limit_mb}MB)', 413)


# Web routes
@app.route('/')
def index():
    """Home page with upload form."""
    return render_template_string(
        UPLOAD_PAGE,
        max_mb=app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024),
        generate_url=url_for('generate'),
    )


@app.route('/generate', methods=['POST'])
def generate():
    """Generate character sheet from uploaded XML."""
    if 'file' not in request.files:
        return _error('No file uploaded', 400)

    file = request.files['file']
    if file.filename == '':
        return _error('No file selected', 400)

    if not file.filename.lower().endswith(config.ALLOWED_EXTENSIONS):
        return _error('File must be XML format', 400)

    upload_name = secure_filename(file.filename)
    try:
        sheet = generate_sheet(file.read())
    except DocumentError as e:
        logger.warning("Rejected %s: %s", upload_name, e)
        return _error(str(e), 400)
    except SheetError as e:
        return _error(str(e), 500)
    except Exception as e:
        logger.exception("Error processing %s", upload_name)
        return _error(str(e) or 'Error processing file', 500)

    logger.info("Converted %s -> %s", upload_name, sheet.filename)

    if _wants_download():
        # Return HTML as downloadable file
        return send_file(
            BytesIO(sheet.html.encode('utf-8')),
            mimetype='text/html',
            as_attachment=True,
            download_name=sheet.filename
        )

    return jsonify({'success': True, **sheet.to_dict()})


@app.route('/health')
def health():
    """Health check for Vercel."""
    return jsonify({'status': 'ok'}), 200
