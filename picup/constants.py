"""Shared constants for picup dot-directories and artefact locations."""

PICUP_HOME_EXT = ".picup"  # user-level state/config directory suffix

PICUP_HOME_DISPLAY = f"~/{PICUP_HOME_EXT}"  # user-readable path hint

# Image extensions accepted by explicit uploads
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp", ".tiff", ".ico", ".svg"}

# Suffix appended to the stem of a duplicated document
UPLOADED_VERSION_SUFFIX = "_uploadedVersion"

# Sub-directory holding duplicated documents when the output folder is enabled
UPLOAD_VERSION_DIRNAME = "uploadVersion"

# Attachment folders searched (in order) for wiki-link embeds, relative to the document
WIKILINK_ATTACHMENT_DIRS = ("attachments", "assets", "")

DEFAULT_PICGO_URL = "http://127.0.0.1:36677/upload"
