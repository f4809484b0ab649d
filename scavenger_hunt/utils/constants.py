TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

PROGRESS_KEY = 'seattle_scavenger_hunt_progress'
PROGRESS_SCHEMA_VERSION = 1

EARTH_RADIUS_KM = 6371.0

# Achievement thresholds
CATEGORY_EXPLORER_CATEGORIES = 5
POINT_COLLECTOR_POINTS = 500
PHOTO_MASTER_ACTIVITIES = 10
DOMAIN_EXPERT_ACTIVITIES = 15

# Store backends selectable through SCAVENGER_STORE
STORE_BACKENDS = ('memory', 'sqlite', 'postgres')
DEFAULT_STORE_BACKEND = 'sqlite'
