"""Tests for the helpers in app.utils and the image host wrapper."""

from datetime import datetime, timedelta
from unittest.mock import patch

import pytest

from app.services.image_host import ImageHost, ImageHostError
from app.utils import allowed_file, escape_like, is_safe_redirect, time_ago


class TestAllowedFile:

    @pytest.mark.parametrize('filename', ['a.jpg', 'b.JPEG', 'c.png', 'd.Gif'])
    def test_image_extensions_are_allowed(self, app, filename):
        with app.app_context():
            assert allowed_file(filename)

    @pytest.mark.parametrize('filename', ['notes.txt', 'image', 'archive.jpg.zip', 'jpg'])
    def test_other_files_are_rejected(self, app, filename):
        with app.app_context():
            assert not allowed_file(filename)


def test_escape_like_escapes_wildcards_and_escape_char():
    assert escape_like('50%_off\\') == '50\\%\\_off\\\\'
    assert escape_like('tent (small)') == 'tent (small)'


@pytest.mark.parametrize('target, expected', [
    ('/campgrounds/new', True),
    ('https://evil.example/', False),
    ('//evil.example/', False),
    ('/\\evil.example/', False),
    ('/campgrounds\\new', False),
    ('', False),
    (None, False),
])
def test_is_safe_redirect(target, expected):
    assert is_safe_redirect(target) is expected


def test_time_ago():
    now = datetime(2026, 1, 1, 12, 0, 0)
    assert time_ago(now - timedelta(seconds=10), now=now) == 'a few seconds ago'
    assert time_ago(now - timedelta(minutes=5), now=now) == '5 minutes ago'
    assert time_ago(now - timedelta(hours=1), now=now) == 'an hour ago'
    assert time_ago(now - timedelta(days=3), now=now) == '3 days ago'
    assert time_ago(None) == ''


class TestImageHost:

    def setup_method(self):
        self.host = ImageHost(cloud_name='cloud', api_key='key', api_secret='secret')

    def test_upload_passes_credentials_per_call(self):
        class Upload:
            filename = 'pine.jpg'
            stream = object()

        with patch('app.services.image_host.cloudinary.uploader.upload') as mock_upload:
            mock_upload.return_value = {'secure_url': 'https://img/1.jpg', 'public_id': 'abc'}

            image = self.host.upload(Upload())

        assert image.url == 'https://img/1.jpg'
        assert image.asset_id == 'abc'
        _, kwargs = mock_upload.call_args
        assert kwargs['cloud_name'] == 'cloud'
        assert kwargs['api_key'] == 'key'
        assert kwargs['api_secret'] == 'secret'

    def test_upload_errors_are_wrapped(self):
        class Upload:
            filename = 'pine.jpg'
            stream = object()

        with patch('app.services.image_host.cloudinary.uploader.upload', side_effect=RuntimeError('boom')):
            with pytest.raises(ImageHostError) as excinfo:
                self.host.upload(Upload())

        assert 'boom' in excinfo.value.message

    @pytest.mark.parametrize('answer', ['ok', 'not found'])
    def test_destroy_accepts_deleted_or_missing(self, answer):
        with patch('app.services.image_host.cloudinary.uploader.destroy', return_value={'result': answer}):
            self.host.destroy('abc')

    def test_destroy_raises_on_other_answers(self):
        with patch('app.services.image_host.cloudinary.uploader.destroy', return_value={'result': 'error'}):
            with pytest.raises(ImageHostError):
                self.host.destroy('abc')

    def test_missing_credentials_raise(self):
        host = ImageHost(cloud_name=None, api_key=None, api_secret=None)

        with pytest.raises(ImageHostError):
            host.destroy('abc')
