"""
Vitals evaluation: fever flag and medication recommendation.

The medication rule and the high/low BP query thresholds deliberately differ:
the queries look at one reading each (systolic > 140, diastolic < 70) while
the medication rule also treats diastolic > 90 as needing BP control.
"""

FEVER_THRESHOLD = 100.4  # °F
HIGH_SYSTOLIC_THRESHOLD = 140
LOW_DIASTOLIC_THRESHOLD = 70
HIGH_DIASTOLIC_THRESHOLD = 90

BP_MEDICATION = "BP Control Med"
FEVER_MEDICATION = "Fever Med"
NO_MEDICATION = "No medication"


def has_fever(temperature: float) -> bool:
    return temperature > FEVER_THRESHOLD


def determine_medication(systolic_bp: float, diastolic_bp: float, fever: bool) -> str:
    meds = []
    if (
        systolic_bp > HIGH_SYSTOLIC_THRESHOLD
        or diastolic_bp < LOW_DIASTOLIC_THRESHOLD
        or diastolic_bp > HIGH_DIASTOLIC_THRESHOLD
    ):
        meds.append(BP_MEDICATION)
    if fever:
        meds.append(FEVER_MEDICATION)
    return ", ".join(meds) if meds else NO_MEDICATION
