import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}

def file_extension(filename):
    if not filename or '.' not in filename:
        return None
    return filename.rsplit('.', 1)[1].lower()

def allowed_file(filename):
    return file_extension(filename) in ALLOWED_EXTENSIONS

def save_file(file):
    if not allowed_file(file.filename):
        raise ValueError("File type not allowed")

    filename = secure_filename(file.filename)
    ext = file_extension(filename)
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    upload_folder = current_app.config.get('UPLOAD_FOLDER', 'uploads')
    os.makedirs(upload_folder, exist_ok=True)
    file_path = os.path.join(upload_folder, unique_filename)

    file.stream.seek(0)
    file.save(file_path)

    # Return URL (local for dev, S3 URL in production)
    return f"/{upload_folder.strip('/')}/{unique_filename}"


def delete_file(file_url):
    """
    Deletes a file given its URL or path.
    Converts URL to local path if necessary.
    """
    if not file_url:
        return False

    # Remove leading slash if present
    file_path = file_url.lstrip('/')

    if os.path.exists(file_path):
        try:
            os.remove(file_path)
            return True
        except OSError as e:
            current_app.logger.error(f"Failed to delete file {file_path}: {e}")
            return False
    return False
