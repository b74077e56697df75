import warnings

# Suppress Google SDK FutureWarning messages about Python version deprecation
# These clutter the CLI and Pulumi engine output.
warnings.filterwarnings("ignore", category=FutureWarning, module="google.auth")
warnings.filterwarnings("ignore", category=FutureWarning, module="google.oauth2")
