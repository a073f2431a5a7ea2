"""
Database initialization script
Creates the devices and devices_attributes tables
"""
import logging

from smarthome.database import engine
from smarthome.models import Base

logger = logging.getLogger(__name__)

def init_database(bind=None):
    """Create missing tables; existing tables and rows are left alone"""
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database schema ready")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
