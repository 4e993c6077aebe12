import pytest

from picup.api.config.UploadConfig import UploadConfig
from picup.api.upload.CommandUploader import CommandUploader
from picup.api.upload.get_uploader import get_uploader
from picup.api.upload.PicgoUploader import PicgoUploader

pytestmark = pytest.mark.upload


def test_picgo_is_default():
    uploader = get_uploader(UploadConfig())
    assert isinstance(uploader, PicgoUploader)
    assert uploader.url == "http://127.0.0.1:36677/upload"


def test_command_uploader():
    uploader = get_uploader(UploadConfig(type="command", command=["picgo", "upload"], timeout_secs=5))
    assert isinstance(uploader, CommandUploader)
    assert uploader.command == ["picgo", "upload"]
    assert uploader.timeout_secs == 5
