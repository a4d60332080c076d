from .context import Context
from .enums import Endpoints, Enum, ErrorCodes, MimeTypes, Paths
from .helpers import auto_repr, clean_params, encode_params, encode_value, flatten_params, parse_media_type, raise_errors_in, to_snake_case, validate_timestamp
from .mappings import Mappings
from .request import Request
