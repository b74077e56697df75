# Firebase Storage management API
API_HOST = "firebasestorage.googleapis.com"
API_VERSION = "v1alpha"

# Scopes requested when explicit key material is supplied or ADC is resolved
SCOPES = [
    "https://www.googleapis.com/auth/firebase",
    "https://www.googleapis.com/auth/firebase.storage",
    "https://www.googleapis.com/auth/cloud-platform",
]

DEFAULT_LOCATION = "us"

# e.g. projects/demo-proj/defaultBucket
DEFAULT_BUCKET_ID = "projects/{project}/defaultBucket"

# Pulumi config namespace/key and env fallback for credentials
CONFIG_NAMESPACE = "firebase"
CONFIG_CREDENTIALS_KEY = "credentials"
CREDENTIALS_ENV_VAR = "FIREBASE_CREDENTIALS"
