from dataclasses import dataclass

from ..models import Company, Customer, ShowRoom, Vehicle


# ----------------------------
# Party kinds
# ----------------------------
@dataclass(frozen=True)
class PartyType:
    tag: str           # user_type value on receipts/vehicles
    model: type        # concrete party model
    code_field: str    # business code column the tag's id refers to
    owner_field: str   # FK on MoneyReceipt/Vehicle/Invoice


PARTY_TYPES = {
    "customer": PartyType("customer", Customer, "customer_code", "customer"),
    "company": PartyType("company", Company, "company_code", "company"),
    "showRoom": PartyType("showRoom", ShowRoom, "showroom_code", "show_room"),
}


@dataclass(frozen=True)
class Owner:
    """Resolved owner: Customer | Company | ShowRoom, or nobody."""
    kind: str | None = None
    party: object = None

    @classmethod
    def none(cls):
        return cls()

    def __bool__(self):
        return self.party is not None

    @property
    def pk(self):
        return self.party.pk if self.party is not None else None


def find_party(kind, code):
    """Party of the given kind with this business code, or None."""
    party_type = PARTY_TYPES.get(kind)
    if party_type is None or not code:
        return None
    return party_type.model.objects.filter(**{party_type.code_field: code}).first()


def owner_of(record) -> Owner:
    """Read the owner currently linked on a receipt/vehicle/invoice."""
    for party_type in PARTY_TYPES.values():
        party = getattr(record, party_type.owner_field)
        if party is not None:
            return Owner(party_type.tag, party)
    return Owner.none()


# ----------------------------
# Linking
# ----------------------------
def attach(kind, code, record) -> Owner:
    """
    Link record (an unsaved or saved receipt/vehicle) to its owner.
    The party's receipt list is the reverse FK, so attaching twice
    never produces a duplicate entry. A missing party is not an error:
    the record is left unlinked.
    """
    party = find_party(kind, code)
    # at most one owner FK populated
    record.clear_owner()
    if party is None:
        return Owner.none()
    setattr(record, PARTY_TYPES[kind].owner_field, party)
    return Owner(kind, party)


def detach(kind, code, record, *, save=True):
    """
    Remove record from its owner's list. Best effort:
    unknown kinds and missing parties are ignored.
    With save=False only the in-memory link is cleared, for a record
    that is about to be deleted.
    """
    party = find_party(kind, code)
    if party is None:
        return False

    owner_field = PARTY_TYPES[kind].owner_field
    if getattr(record, f"{owner_field}_id") != party.pk:
        return False

    setattr(record, owner_field, None)
    if save and record.pk and not record._state.adding:
        record.save(update_fields=[owner_field, "updated_at"])
    return True


def resolve_vehicle(chassis_no):
    if not chassis_no:
        return None
    return Vehicle.objects.filter(chassis_no=chassis_no).first()


def link_vehicle(record, chassis_no, full_reg_number=None):
    """
    Attach the vehicle matching chassis_no and copy its registration
    number onto the record. No matching vehicle leaves record untouched.
    """
    vehicle = resolve_vehicle(chassis_no)
    if vehicle is None:
        return None
    record.vehicle = vehicle
    record.full_reg_number = full_reg_number or vehicle.full_reg_num
    return vehicle
