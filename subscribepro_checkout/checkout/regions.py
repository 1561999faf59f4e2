"""
Annuaire des régions (états US, provinces CA).
- load_by_code / load_by_name: recherche insensible à la casse, par pays
- Région introuvable: Region vide (id None), comme un chargement de modèle qui ne trouve rien
"""
from typing import Dict, List, Optional, Tuple

# (country_id, code, name)
_REGIONS: List[Tuple[str, str, str]] = [
    ("US", "AL", "Alabama"), ("US", "AK", "Alaska"), ("US", "AZ", "Arizona"),
    ("US", "AR", "Arkansas"), ("US", "CA", "California"), ("US", "CO", "Colorado"),
    ("US", "CT", "Connecticut"), ("US", "DE", "Delaware"), ("US", "DC", "District of Columbia"),
    ("US", "FL", "Florida"), ("US", "GA", "Georgia"), ("US", "HI", "Hawaii"),
    ("US", "ID", "Idaho"), ("US", "IL", "Illinois"), ("US", "IN", "Indiana"),
    ("US", "IA", "Iowa"), ("US", "KS", "Kansas"), ("US", "KY", "Kentucky"),
    ("US", "LA", "Louisiana"), ("US", "ME", "Maine"), ("US", "MD", "Maryland"),
    ("US", "MA", "Massachusetts"), ("US", "MI", "Michigan"), ("US", "MN", "Minnesota"),
    ("US", "MS", "Mississippi"), ("US", "MO", "Missouri"), ("US", "MT", "Montana"),
    ("US", "NE", "Nebraska"), ("US", "NV", "Nevada"), ("US", "NH", "New Hampshire"),
    ("US", "NJ", "New Jersey"), ("US", "NM", "New Mexico"), ("US", "NY", "New York"),
    ("US", "NC", "North Carolina"), ("US", "ND", "North Dakota"), ("US", "OH", "Ohio"),
    ("US", "OK", "Oklahoma"), ("US", "OR", "Oregon"), ("US", "PA", "Pennsylvania"),
    ("US", "PR", "Puerto Rico"), ("US", "RI", "Rhode Island"), ("US", "SC", "South Carolina"),
    ("US", "SD", "South Dakota"), ("US", "TN", "Tennessee"), ("US", "TX", "Texas"),
    ("US", "UT", "Utah"), ("US", "VT", "Vermont"), ("US", "VA", "Virginia"),
    ("US", "WA", "Washington"), ("US", "WV", "West Virginia"), ("US", "WI", "Wisconsin"),
    ("US", "WY", "Wyoming"),
    ("CA", "AB", "Alberta"), ("CA", "BC", "British Columbia"), ("CA", "MB", "Manitoba"),
    ("CA", "NB", "New Brunswick"), ("CA", "NL", "Newfoundland and Labrador"),
    ("CA", "NS", "Nova Scotia"), ("CA", "NT", "Northwest Territories"), ("CA", "NU", "Nunavut"),
    ("CA", "ON", "Ontario"), ("CA", "PE", "Prince Edward Island"), ("CA", "QC", "Quebec"),
    ("CA", "SK", "Saskatchewan"), ("CA", "YT", "Yukon Territory"),
]

# module subscribepro_checkout.checkout.regions
class Region:
    def __init__(self, id: Optional[int] = None, code: Optional[str] = None, name: Optional[str] = None, country_id: Optional[str] = None):
        self.id = id
        self.code = code
        self.name = name
        self.country_id = country_id

    def __bool__(self) -> bool:
        return self.id is not None


class RegionDirectory:
    def __init__(self, regions: Optional[List[Tuple[str, str, str]]] = None):
        self._by_code: Dict[Tuple[str, str], Region] = {}
        self._by_name: Dict[Tuple[str, str], Region] = {}
        for region_id, (country_id, code, name) in enumerate(regions or _REGIONS, start=1):
            region = Region(region_id, code, name, country_id)
            self._by_code[(country_id.upper(), code.upper())] = region
            self._by_name[(country_id.upper(), name.lower())] = region

    def load_by_code(self, code: Optional[str], country_id: Optional[str]) -> Region:
        key = ((country_id or "").upper(), (code or "").strip().upper())
        return self._by_code.get(key) or Region()

    def load_by_name(self, name: Optional[str], country_id: Optional[str]) -> Region:
        key = ((country_id or "").upper(), (name or "").strip().lower())
        return self._by_name.get(key) or Region()
