from .convert import handle_extract, handle_transcode, _convert_single_file
from .styles import handle_styles

__all__ = [
  "_convert_single_file",
  "handle_extract",
  "handle_styles",
  "handle_transcode",
]
