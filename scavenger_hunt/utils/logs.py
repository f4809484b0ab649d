import logging
import sys


def setup_logging(level: int = logging.INFO):
    '''Configure the root logger for the scavenger hunt tools.'''
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # psycopg_pool is chatty at INFO about connection churn
    logging.getLogger('psycopg.pool').setLevel(max(level, logging.WARNING))
