import logging

logger = logging.getLogger("geocoord")
