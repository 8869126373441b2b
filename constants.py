import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL = logging.INFO

# parallel builder splits the worklist into at least this many tasks
DEFAULT_FAN_OUT = 4

BENCHMARK_SIZES = (100, 2000, 200_000)
BENCHMARK_REPEAT = 5
BOX_LOW = -1.0
BOX_HIGH = 1.0
