from ledger import RentalLedger
from registry import CustomerRegistry
from schemas import Customer, Rental, Vehicle


def test_register_generates_sequential_ids():
    registry = CustomerRegistry()
    ids = [registry.register(name).customer_id for name in ("Alice", "Bob", "Carol")]
    assert ids == ["CUST1", "CUST2", "CUST3"]


def test_added_customers_count_toward_next_id():
    registry = CustomerRegistry()
    registry.add(Customer(customer_id="CUST1", name="Seeded"))
    assert registry.register("Bob").customer_id == "CUST2"


def test_find_customer_by_id():
    registry = CustomerRegistry()
    bob = registry.register("Bob")
    assert registry.find_by_id("CUST1") is bob
    assert registry.find_by_id("CUSTX") is None


def test_history_is_append_only_in_order():
    registry = CustomerRegistry()
    bob = registry.register("Bob")
    first = Rental(vehicle_id="C001", customer_id=bob.customer_id, days=2)
    second = Rental(vehicle_id="C002", customer_id=bob.customer_id, days=5)
    registry.append_rental_to_history(bob, first)
    registry.append_rental_to_history(bob, second)
    assert bob.history == [first, second]


def test_ledger_open_and_close():
    ledger = RentalLedger()
    vehicle = Vehicle(vehicle_id="C001", brand="Toyota", model="Camry", base_price_per_day=60.0)
    bob = Customer(customer_id="CUST1", name="Bob")

    rental = ledger.open(vehicle, bob, 3)
    assert rental == Rental(vehicle_id="C001", customer_id="CUST1", days=3)
    assert ledger.references("C001")

    assert ledger.close_by_vehicle(vehicle) == 1
    assert not ledger.references("C001")
    assert ledger.active() == []


def test_ledger_close_removes_every_matching_entry():
    ledger = RentalLedger()
    camry = Vehicle(vehicle_id="C001", brand="Toyota", model="Camry", base_price_per_day=60.0)
    accord = Vehicle(vehicle_id="C002", brand="Honda", model="Accord", base_price_per_day=70.0)
    bob = Customer(customer_id="CUST1", name="Bob")
    ledger.open(camry, bob, 1)
    ledger.open(accord, bob, 1)
    ledger.open(camry, bob, 2)

    assert ledger.close_by_vehicle(camry) == 2
    assert [r.vehicle_id for r in ledger.active()] == ["C002"]


def test_ledger_history_is_the_customers_own_list():
    ledger = RentalLedger()
    bob = Customer(customer_id="CUST1", name="Bob")
    assert ledger.history_for(bob) is bob.history


def test_ledger_close_leaves_other_vehicle_with_same_id():
    ledger = RentalLedger()
    camry = Vehicle(vehicle_id="C001", brand="Toyota", model="Camry", base_price_per_day=60.0, serial=1)
    panda = Vehicle(vehicle_id="C001", brand="Fiat", model="Panda", base_price_per_day=30.0, serial=2)
    bob = Customer(customer_id="CUST1", name="Bob")
    ledger.open(camry, bob, 1)
    ledger.open(panda, bob, 2)

    assert ledger.close_by_vehicle(camry) == 1
    assert [r.vehicle_serial for r in ledger.active()] == [2]
