# Short URL generation
SHORTCODE_LENGTH = 6

# Maximum number of click events retained per short URL
CLICK_HISTORY_LIMIT = 100

# Number of clicks reported in the recent clicks section of URL stats
RECENT_CLICKS_LIMIT = 10

# Public base URL used to display short URLs
DEFAULT_BASE_URL = 'http://localhost:5002'

# Application environment variables
APP_ENV_ENV = 'APP_ENV'
PROJECT_ROOT_ENV = 'PROJECT_ROOT'
LOG_LEVEL_ENV = 'LOG_LEVEL'

# Shortener configuration environment variables
CONFIG_FILE_ENV = 'SHORTENER_CONFIG_FILE'
BASE_URL_ENV = 'BASE_URL'
SEED_DEMO_DATA_ENV = 'SEED_DEMO_DATA'
SHORTCODE_LENGTH_ENV = 'SHORTCODE_LENGTH'
CLICK_HISTORY_LIMIT_ENV = 'CLICK_HISTORY_LIMIT'
