# Game Constants

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 900

TARGET_FPS = 60
FRAME_RATE = 60             # Reference rate the per-frame FRICTION was tuned at
MAX_FRAME_DT = 0.1          # Seconds; caps a frame after a stall

WINDOW_CAPTION = "Primeroids"

# Mission
MISSION_DURATION = 120      # Seconds
INITIAL_ASTEROIDS = 30      # Total asteroid pool for a mission
INITIAL_SPAWN = 6           # Asteroids on screen when a mission starts
MIN_ACTIVE_ASTEROIDS = 5    # Keep at least this many on screen while the pool lasts

# Tutorial
TUTORIAL_PRIMES = [2, 3, 5, 7, 11]
TUTORIAL_COMPOSITES = [4, 6, 8, 9, 10]
TUTORIAL_SPEED_SCALE = 0.5

# Ship movement
SHIP_TURN_SPEED = 4.8       # Radians per second
SHIP_ACCELERATION = 900     # Pixels per second squared
SHIP_MAX_SPEED = 240        # Pixels per second
SHIP_FRICTION = 0.98        # Velocity kept per reference frame
SHIP_WRAP_MARGIN = 50
SHIP_NOSE_OFFSET = 30
SHIP_EXHAUST_OFFSET = 20

# Ship hull
SHIP_BASE_HEALTH = 100
HULL_UPGRADE_MULTIPLIER = 1.5
FIRE_DELAY = 400            # Milliseconds between shots

# Elliptical hitboxes (width, height)
HITBOX_COLLECTION = (35, 20)
HITBOX_COMBAT = (45, 35)

# Asteroids
ASTEROID_BASE_RADIUS = 20
ASTEROID_RADIUS_LOG_MULTIPLIER = 8
ASTEROID_MIN_SPEED = 48     # Pixels per second
ASTEROID_MAX_SPEED = 120
ASTEROID_MIN_POINTS = 8
ASTEROID_MAX_EXTRA_POINTS = 5
ASTEROID_RADIUS_VARIATION_MIN = 0.7
ASTEROID_RADIUS_VARIATION_MAX = 1.3
ASTEROID_SPAWN_MARGIN = 100
FACTOR_KICK_SPEED = 30      # Extra radial speed given to factor children

# Number generation
PRIME_CHANCE = 0.4
MIN_NUMBER = 2
MAX_NUMBER = 50
NUMBER_RETRY_LIMIT = 100
FALLBACK_PRIME = 7
FALLBACK_COMPOSITE = 6

# Hits without the firepower upgrade
HITS_TO_BREAK = 2
FACTORIZATION_RELIABILITY = 0.8
HIT_FLASH_DURATION = 167    # Milliseconds

# Projectiles
PROJECTILE_SPEED = 480
PROJECTILE_LIFE = 1333      # Milliseconds
PROJECTILE_RADIUS = 3
PROJECTILE_MARGIN = 50

# Particles
THRUST_CHANCE = 0.3         # Per tick, not scaled by dt
THRUST_LIFE = 333           # Milliseconds
THRUST_SPEED = 120
THRUST_SPREAD = 30
EXPLOSION_COUNT = 10
COLLECTION_COUNT = 15
EXPLOSION_LIFE = 500
EXPLOSION_MIN_SPEED = 60
EXPLOSION_MAX_SPEED = 180

# Collision damage (collection mode composites deal their own number)
PRIME_COMBAT_DAMAGE = 10
COMPOSITE_COMBAT_DAMAGE = 15

# Economy, all amounts in cents
STARTING_WALLET = 1000
SPACE_TAX = 50
BASE_MAINTENANCE = 10
MAINTENANCE_PER_DAMAGE = 0.5
TOW_FEE = 200
THRUST_COST_PER_SECOND = 0.6
TURN_COST_PER_SECOND = 0.3
BULLET_COST_BASE = 0.5
BULLET_COST_FIREPOWER = 2.0
INFLATION_RATE = 1.05
ACQUISITION_MIN_MISSIONS = 4
ACQUISITION_WINDOW = 4
ACQUISITION_MULTIPLIER = 5

# Subscriptions
SCANNER_COST = 30
YIELD_COST = 20
YIELD_BONUS = 0.5
FIREPOWER_COST = 25
HULL_COST = 35

# Streak bonuses
STREAK_SMALL_THRESHOLD = 3
STREAK_SMALL_BONUS = 0.10
STREAK_LARGE_THRESHOLD = 7
STREAK_LARGE_BONUS = 0.30

# HUD
HEALTH_WARNING_THRESHOLD = 60
HEALTH_DANGER_THRESHOLD = 30
STARFIELD_COUNT = 80

# Colors
BACKGROUND_COLOR = (5, 6, 14)
PRIME_COLOR = (59, 130, 246)
PRIME_STROKE = (96, 165, 250)
COMPOSITE_COLOR = (239, 68, 68)
COMPOSITE_STROKE = (248, 113, 113)
NEUTRAL_COLOR = (107, 114, 128)
NEUTRAL_STROKE = (156, 163, 175)
COLLECTION_COLOR = (34, 211, 238)
HIT_FLASH_COLOR = (255, 255, 255)
PROJECTILE_COLOR = (245, 158, 11)
THRUST_COLOR = (34, 211, 238)
HUD_COLOR = (220, 230, 255)
WARNING_COLOR = (250, 204, 21)
DANGER_COLOR = (239, 68, 68)
