from app import create_app
from app.models.agency import Agency, total_to_pay
from app.models.optioned_car import OptionedCar
from app.models.store import Store
from app.models.vehicle import Car, Utility
from app.utils.filters import fmt_money


def ensure_agency(store: Store, agency: Agency) -> Agency:
    """
    Register `agency` unless one with the same name already exists.
    Returns the registered instance either way (idempotent).
    """
    existing = store.get_agency(agency.name)
    if existing is not None:
        return existing
    store.add_agency(agency)
    return agency


def main():
    app = create_app({"TAX_RATE": 0.18})
    with app.app_context():
        store = Store.instance()

        # ---- Demo catalogue (create only if empty) ----
        if not store.vehicles:
            for v in (
                Car("AB-123-CD", 50.0, 5),
                Car("EF-456-GH", 65.0, 7),
                Utility("IJ-789-KL", 80.0, 15.5),
                Utility("MN-012-OP", 95.0, 22.0),
                OptionedCar.build("GG-444-HH", 70.0, 5, True, True, 12.0, 7.0),
            ):
                store.add_vehicle(v)

        catalogue = sorted(store.vehicles.values(), key=lambda v: v.id)

        # ---- Demo agencies ----
        center = ensure_agency(store, Agency("Agency_Center", 5))
        north = ensure_agency(store, Agency("Agency_North", 3))
        if not len(center):
            for v in catalogue[:3]:
                center.insert(v)
        if not len(north):
            north.insert(Car("QR-345-ST", 55.0, 4))
            north.insert(catalogue[-1])

        merged_name = f"{center.name}_{north.name}"
        merged = store.get_agency(merged_name)
        if merged is None:
            merged = ensure_agency(store, center + north)

        for agency in (center, north, merged):
            print(agency.describe())

        days = 7
        print(f"Total to pay for {days} days:")
        for agency in (center, north, merged):
            print(f"  {agency.name}: {fmt_money(total_to_pay(agency, days))}")

        print("✅ Seed complete.")


if __name__ == "__main__":
    main()
