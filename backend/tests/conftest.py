import os

# Disable API key auth for tests (most tests run without an Authorization header)
os.environ["APIKEY_SERVICE_NO_AUTH"] = "true"
# Disable rate limiting for tests
os.environ["APIKEY_SERVICE_NO_RATE_LIMIT"] = "true"
