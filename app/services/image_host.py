# app/services/image_host.py
# This service is responsible for storing listing images with the hosting provider.

from dataclasses import dataclass
import cloudinary.uploader


class ImageHostError(Exception):
    """Custom exception for image hosting failures"""
    def __init__(self, message, original_error=None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


@dataclass
class UploadedImage:
    """Result of a successful upload: the public URL and the asset id needed to delete it."""
    url: str
    asset_id: str


class ImageHost:
    """
    Thin wrapper around the Cloudinary uploader.

    Credentials are passed on every call instead of through cloudinary.config(),
    so several apps (or tests) in the same process never share global state.
    """

    # Cloudinary answers 'not found' when the asset is already gone; that is
    # the state we wanted anyway.
    DESTROY_OK_RESULTS = ('ok', 'not found')

    def __init__(self, cloud_name, api_key, api_secret, folder=None):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder

    @classmethod
    def from_config(cls, config):
        return cls(
            cloud_name=config.get('CLOUDINARY_CLOUD_NAME'),
            api_key=config.get('CLOUDINARY_API_KEY'),
            api_secret=config.get('CLOUDINARY_API_SECRET'),
            folder=config.get('CLOUDINARY_FOLDER'),
        )

    def _credentials(self):
        if not (self.cloud_name and self.api_key and self.api_secret):
            raise ImageHostError("Image hosting credentials are not configured.")
        return {
            'cloud_name': self.cloud_name,
            'api_key': self.api_key,
            'api_secret': self.api_secret,
        }

    def upload(self, file_storage):
        """
        Uploads a werkzeug FileStorage and returns an UploadedImage.

        Raises:
            ImageHostError: If the provider rejects the file or cannot be reached
        """
        options = self._credentials()
        if self.folder:
            options['folder'] = self.folder

        try:
            result = cloudinary.uploader.upload(file_storage.stream, **options)
        except Exception as e:
            raise ImageHostError(f"Image upload failed: {str(e)}", original_error=e) from e

        url = result.get('secure_url')
        asset_id = result.get('public_id')
        if not url or not asset_id:
            raise ImageHostError("Image upload failed: the provider returned no URL.")

        return UploadedImage(url=url, asset_id=asset_id)

    def destroy(self, asset_id):
        """
        Deletes a hosted asset by its id.

        Raises:
            ImageHostError: If the provider reports anything other than a deletion
        """
        options = self._credentials()

        try:
            result = cloudinary.uploader.destroy(asset_id, **options)
        except Exception as e:
            raise ImageHostError(f"Image deletion failed: {str(e)}", original_error=e) from e

        outcome = (result or {}).get('result')
        if outcome not in self.DESTROY_OK_RESULTS:
            raise ImageHostError(f"Image deletion failed: provider answered '{outcome}'.")
