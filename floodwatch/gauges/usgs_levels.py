"""
Latest USGS gage height for a site.

Used as a secondary source of a gauge's current stage when the forecast
service publishes no recent observation.
"""

import logging
from typing import Optional

import dataretrieval.nwis as nwis

from floodwatch.utils.config import config

logger = logging.getLogger(__name__)


def fetch_latest_gage_height(site_id: str) -> Optional[float]:
    """
    Fetch the most recent instantaneous gage height for a USGS site.

    Args:
        site_id: USGS site identifier (e.g., "07374000")

    Returns:
        Gage height in feet, or None if unavailable.
    """
    param = config.usgs.gage_height_param

    try:
        df, _ = nwis.get_iv(sites=site_id, parameterCd=param)

        if df.empty:
            logger.warning(f"No gage height available for USGS site {site_id}")
            return None

        # Value column is named after the parameter code; qualifiers end in _cd
        value_cols = [c for c in df.columns if c.startswith(param) and not c.endswith("_cd")]
        if not value_cols:
            logger.warning(f"No gage height column for USGS site {site_id}")
            return None

        values = df[value_cols[0]].dropna()
        values = values[values > -999]  # USGS reports -999999 for equipment malfunction
        if values.empty:
            return None

        return float(values.iloc[-1])

    except Exception as e:
        logger.error(f"Error fetching gage height for USGS site {site_id}: {e}")
        return None
