from reading.domain.PlanType import PlanType
from reading.utilities.config import DATA_DIR, PLAN_DATA_DIR, PROGRESS_FILE

# File name of each plan document, relative to PLAN_DATA_DIR or PLAN_BASE_URL
PLAN_FILES = {
    PlanType.NT90: 'nt90.json',
    PlanType.OT365: 'ot365.json',
    PlanType.ETHIOPIAN: 'ethiopian-calendar.json',
}

__all__ = ['DATA_DIR', 'PLAN_DATA_DIR', 'PROGRESS_FILE', 'PLAN_FILES']
