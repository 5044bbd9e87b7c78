DEFAULT_REQUEST_ID_HEADER = "X-Request-Id"
DEFAULT_CONFIG_FILE_PATH = "outbound.yaml"
ENV_PREFIX = "OUTBOUND_"

METHOD_GET = "get"
METHOD_POST = "post"
METHOD_OVERRIDE_KEY = "_method"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_MULTIPART = "multipart/form-data"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"
