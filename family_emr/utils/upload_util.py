# /family_emr/utils/upload_util.py
import os
import secrets
import time
from flask import current_app


class UploadRejected(Exception):
    """Raised when a file fails validation before anything touches the disk."""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class LocalUploadManager:
    """Utility class for storing attachment files in the local uploads folder."""

    def __init__(self, app=None):
        if app:
            self.init_app(app)

    def init_app(self, app):
        """Make sure the configured uploads folder exists."""
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
        app.extensions['upload_manager'] = self

    @property
    def folder(self):
        return current_app.config['UPLOAD_FOLDER']

    def save(self, file):
        """
        Validate and store an uploaded file.

        Args:
            file: werkzeug FileStorage taken from the request

        Returns:
            dict: 'filename', 'originalName', 'path' and 'size' of the stored file

        Raises:
            UploadRejected: when the file is missing, of a disallowed type or too large
        """
        if not file or not file.filename:
            raise UploadRejected('No file provided')

        if not self._is_allowed_file(file.filename):
            raise UploadRejected('File type not allowed')

        if not self._is_allowed_mimetype(file.mimetype):
            raise UploadRejected(f"Content type '{file.mimetype}' not allowed")

        size = self._get_file_size(file)
        max_size = current_app.config['MAX_UPLOAD_SIZE']
        if size > max_size:
            raise UploadRejected(f'File size exceeds {max_size // (1024 * 1024)}MB limit', 413)

        filename = self._generate_filename(file.filename)
        destination = os.path.join(self.folder, filename)
        file.save(destination)

        current_app.logger.info(f"Stored upload '{file.filename}' as '{filename}' ({size} bytes)")

        return {
            'filename': filename,
            'originalName': file.filename,
            'path': f'/uploads/{filename}',
            'size': size,
        }

    def _get_file_extension(self, filename):
        """Extract file extension from filename."""
        if not filename or '.' not in filename:
            return None
        return filename.rsplit('.', 1)[1].lower()

    def _is_allowed_file(self, filename):
        return self._get_file_extension(filename) in current_app.config['ALLOWED_UPLOAD_EXTENSIONS']

    def _is_allowed_mimetype(self, mimetype):
        # Browsers fall back to octet-stream for types they do not know
        if not mimetype or mimetype == 'application/octet-stream':
            return True
        return mimetype in current_app.config['ALLOWED_UPLOAD_MIMETYPES']

    def _get_file_size(self, file):
        file.stream.seek(0, os.SEEK_END)
        file_size = file.stream.tell()
        file.stream.seek(0)  # Reset file pointer
        return file_size

    def _generate_filename(self, original_name):
        """Timestamp plus a random suffix, keeping the original extension."""
        extension = self._get_file_extension(original_name)
        return f"file-{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9):09d}.{extension}"


# Create a single instance
upload_manager = LocalUploadManager()
