"""
Game constants for the snake simulation.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (dcol, drow) per direction; row 0 is the top of the board
DIRECTION_OFFSETS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Cell kinds
EMPTY = "EMPTY"
WALL = "WALL"
SNAKE = "SNAKE"
SNAKE_HEAD = "SNAKE_HEAD"

# Pickup kinds
FOOD = "FOOD"
SPEED_UP = "SPEED_UP"
SLOW_DOWN = "SLOW_DOWN"
POINTS = "POINTS"
GROWTH = "GROWTH"
PENALTY = "PENALTY"
BOOST = "BOOST"
LETHAL = "LETHAL"

PICKUP_KINDS = (FOOD, SPEED_UP, SLOW_DOWN, POINTS, GROWTH, PENALTY, BOOST, LETHAL)

# Kinds that end the game when the head enters them
DEADLY_CELLS = {WALL, SNAKE, SNAKE_HEAD, LETHAL}

# (score delta, speed delta, growth) applied when a pickup is consumed
PICKUP_EFFECTS = {
    FOOD: (4, -10, 3),
    SPEED_UP: (5, -40, 2),
    SLOW_DOWN: (5, 40, 2),
    GROWTH: (7, -10, 7),
    POINTS: (20, -5, 2),
    PENALTY: (-15, 40, 1),
    BOOST: (20, -30, 4),
}

# Weighted spawn tables: (kind, lowest draw, highest draw), inclusive bounds out of 100
NORMAL_SPAWN_TABLE = (
    (FOOD, 1, 49),
    (SPEED_UP, 50, 59),
    (SLOW_DOWN, 60, 69),
    (GROWTH, 70, 79),
    (POINTS, 80, 89),
    (PENALTY, 90, 94),
    (BOOST, 95, 100),
)

CHAOS_SPAWN_TABLE = (
    (FOOD, 1, 39),
    (LETHAL, 40, 49),
    (SPEED_UP, 50, 59),
    (SLOW_DOWN, 60, 69),
    (GROWTH, 70, 79),
    (POINTS, 80, 89),
    (PENALTY, 90, 94),
    (BOOST, 95, 100),
)

SPAWN_DRAW_RANGE = 100
# Chaos-mode ambient spawns draw from this wider range; anything above 100 places nothing
AMBIENT_DRAW_RANGE = 2000
# An ambient pickup disappears with a 1 in N chance per tick
REMOVAL_ODDS = 20
MIN_PICKUPS_FOR_REMOVAL = 2

# Board settings
BOARD_SIZE = 30
FIRST_PICKUP_CELL = (5, 5)
MAX_PICKUPS = 25
MAX_PLACEMENT_ATTEMPTS = 10_000

# Snake settings
START_POSITIONS = [(4, 4), (3, 4), (2, 4)]
START_DIRECTION = RIGHT

# Speed is the tick interval in milliseconds; lower is faster
START_SPEED = 200
MIN_SPEED = 50
MAX_SPEED = 499
# Reported "movement speed" is SPEED_STAT_BASE - speed
SPEED_STAT_BASE = 500

# Lifecycle phases
NOT_STARTED = "NOT_STARTED"
RUNNING = "RUNNING"
PAUSED = "PAUSED"
DEAD = "DEAD"

# High scores
HIGH_SCORE_CAPACITY = 3
NAME_MAX_LENGTH = 10
PENDING_NAME = "*YOU*"
DEFAULT_NAME = "Nobody"
