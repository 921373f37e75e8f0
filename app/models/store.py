import threading

from .agency import Agency
from .vehicle import Vehicle


class Store:
    """
    In-memory registry behind the web layer: catalogue vehicles (owned by the
    store, keyed by id) and agencies (keyed by name). Nothing is persisted;
    a fresh process starts empty.
    """
    _inst = None
    _inst_lock = threading.Lock()

    def __init__(self):
        self.vehicles: dict[int, Vehicle] = {}
        self.agencies: dict[str, Agency] = {}
        self._rw = threading.RLock()
        print("[Store] Using in-memory registry")

    # ---------- Singleton ----------
    @classmethod
    def instance(cls):
        """Return the global singleton instance of Store."""
        with cls._inst_lock:
            if cls._inst is None:
                cls._inst = Store()
        return cls._inst

    def clear(self):
        """Drop every vehicle and agency."""
        with self._rw:
            self.vehicles.clear()
            self.agencies.clear()
            print("[Store] Cleared")

    # ---------- Vehicles ----------
    def add_vehicle(self, vehicle: Vehicle) -> int:
        """Register a catalogue vehicle and return its ID."""
        with self._rw:
            self.vehicles[vehicle.id] = vehicle
            return vehicle.id

    def get_vehicle(self, vehicle_id: int) -> Vehicle | None:
        """Get a catalogue vehicle by ID."""
        return self.vehicles.get(vehicle_id)

    def delete_vehicle(self, vehicle_id: int) -> bool:
        """Delete a catalogue vehicle by ID; agencies keep their own copies."""
        with self._rw:
            if vehicle_id in self.vehicles:
                del self.vehicles[vehicle_id]
                return True
            return False

    # ---------- Agencies ----------
    def agency_exists(self, name: str) -> bool:
        return name in self.agencies

    def add_agency(self, agency: Agency) -> str:
        """Register an agency under its name; names are unique."""
        with self._rw:
            if agency.name in self.agencies:
                raise ValueError("Agency name already exists")
            self.agencies[agency.name] = agency
            return agency.name

    def get_agency(self, name: str) -> Agency | None:
        return self.agencies.get(name)
