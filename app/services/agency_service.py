"""Agency-related service layer utilities."""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from app.exceptions import AgencyNotFoundError
from app.models.agency import Agency
from app.services.common import _store, to_int_safe
from app.utils.constants import InsertRejection

if TYPE_CHECKING:
    from app.models.store import Store  # noqa: F401

_REJECTION_MESSAGES = {
    InsertRejection.CAPACITY_EXCEEDED: "Agency is at full capacity",
    InsertRejection.INVALID_REFERENCE: "Invalid vehicle",
}


class AgencyService:
    """
    Create agencies, insert catalogue vehicles into them, merge, copy, and total.
    Expected failures come back as (ok, message, ...) tuples; lookups of
    unknown agencies raise AgencyNotFoundError.
    """

    @staticmethod
    def create_agency(name: str, capacity, store: Optional["Store"] = None):
        """
        Register a new empty agency.

        Returns:
            (ok: bool, message: str, name: Optional[str])
        """
        st = store or _store()
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            return False, "Agency name is required", None
        if st.agency_exists(name):
            return False, "Agency name exists", None

        cap = to_int_safe(capacity)
        # Agency() raises ConstructionError for None / non-positive capacity
        agency = Agency(name, capacity if cap is None else cap)
        st.add_agency(agency)
        return True, "Agency created", name

    @staticmethod
    def get_agency(name: str, store: Optional["Store"] = None) -> Agency:
        st = store or _store()
        agency = st.get_agency(name)
        if agency is None:
            raise AgencyNotFoundError(f"Error: agency '{name}' not found")
        return agency

    @staticmethod
    def all_agencies(store: Optional["Store"] = None):
        st = store or _store()
        return list(st.agencies.values())

    @staticmethod
    def add_vehicle(agency_name: str, vehicle_id, store: Optional["Store"] = None):
        """
        Insert a duplicate of a catalogue vehicle into an agency.
        An unknown vehicle id is treated like any other invalid reference.

        Returns:
            (ok: bool, message: str)
        """
        st = store or _store()
        agency = AgencyService.get_agency(agency_name, store=st)

        key = to_int_safe(vehicle_id)
        vehicle = st.get_vehicle(key) if key is not None else None

        # check and insert together so concurrent requests cannot overfill
        with st._rw:
            reason = agency.rejection_reason(vehicle)
            if reason is not None or not agency.insert(vehicle):
                return False, _REJECTION_MESSAGES[reason or InsertRejection.CAPACITY_EXCEEDED]
        return True, "Vehicle added"

    @staticmethod
    def merge_agencies(left: str, right: str, store: Optional["Store"] = None):
        """
        Merge two registered agencies into a new one named "<left>_<right>".
        Both sources are left as they are.

        Returns:
            (ok: bool, message: str, name: Optional[str])
        """
        st = store or _store()
        a = AgencyService.get_agency(left, store=st)
        b = AgencyService.get_agency(right, store=st)

        merged = a + b
        if st.agency_exists(merged.name):
            return False, "Agency name exists", None
        st.add_agency(merged)
        return True, "Agencies merged", merged.name

    @staticmethod
    def copy_agency(source: str, new_name: str, store: Optional["Store"] = None):
        """
        Register a deep copy of `source` under `new_name`.

        Returns:
            (ok: bool, message: str, name: Optional[str])
        """
        st = store or _store()
        original = AgencyService.get_agency(source, store=st)

        new_name = new_name.strip() if isinstance(new_name, str) else ""
        if not new_name:
            return False, "Agency name is required", None
        if st.agency_exists(new_name):
            return False, "Agency name exists", None

        clone = original.copy()
        clone.name = new_name
        st.add_agency(clone)
        return True, "Agency copied", new_name

    @staticmethod
    def total_to_pay(name: str, num_days: int, store: Optional["Store"] = None) -> float:
        return round(AgencyService.get_agency(name, store=store).total_to_pay(num_days), 2)
