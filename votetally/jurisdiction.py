'''The fixed table of U.S. jurisdictions used by state-level queries.

Vote records name their jurisdiction (state) in upper case. State tables
are always laid out in the canonical order of :data:`JURISDICTIONS`, which
is alphabetical apart from the district entry sorting as ``WASHINGTON DC``.
'''

from typing import Dict, Optional, Tuple


JURISDICTIONS: Tuple[str, ...] = (
    'ALABAMA', 'ALASKA', 'ARIZONA', 'ARKANSAS', 'CALIFORNIA',
    'COLORADO', 'CONNECTICUT', 'DELAWARE', 'FLORIDA', 'GEORGIA',
    'HAWAII', 'IDAHO', 'ILLINOIS', 'INDIANA', 'IOWA',
    'KANSAS', 'KENTUCKY', 'LOUISIANA', 'MAINE', 'MARYLAND',
    'MASSACHUSETTS', 'MICHIGAN', 'MINNESOTA', 'MISSISSIPPI', 'MISSOURI',
    'MONTANA', 'NEBRASKA', 'NEVADA', 'NEW HAMPSHIRE', 'NEW JERSEY',
    'NEW MEXICO', 'NEW YORK', 'NORTH CAROLINA', 'NORTH DAKOTA', 'OHIO',
    'OKLAHOMA', 'OREGON', 'PENNSYLVANIA', 'RHODE ISLAND', 'SOUTH CAROLINA',
    'SOUTH DAKOTA', 'TENNESSEE', 'TEXAS', 'UTAH', 'VERMONT',
    'VIRGINIA', 'WASHINGTON', 'WASHINGTON DC', 'WEST VIRGINIA', 'WISCONSIN',
    'WYOMING',
)
'''Canonical jurisdiction names, in the order state tables are reported.'''

N_JURISDICTIONS: int = len(JURISDICTIONS)

_INDEX: Dict[str, int] = {name: i for i, name in enumerate(JURISDICTIONS)}


def index_of(name: str) -> Optional[int]:
    '''Return the position of the jurisdiction in the canonical table.

    The match is exact and case-sensitive, as the names are stored
    in the records.

    :param name: Jurisdiction name as stored in a vote record.
    :returns: Index into :data:`JURISDICTIONS`, or None if the name is not
        a recognized jurisdiction.
    '''
    return _INDEX.get(name)
