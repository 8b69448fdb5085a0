"""
residents and programs taking part in the match
preference lists (rol = rank order list) are sorted from most to least preferred
"""


class MalformedInput(ValueError):
    """Raised when the input breaks a precondition of the matching."""

    pass


class Resident:
    def __init__(self, id, first_name, last_name, rol):
        self.id = id
        self.first_name = first_name
        self.last_name = last_name
        # program ids
        self.rol = list(rol)

        self.matched_program = None
        # rank of this resident in the rol of its matched program
        self.matched_rank = -1

    def match(self, program):
        self.matched_program = program
        self.matched_rank = program.rank(self.id)

    def unmatch(self):
        self.matched_program = None
        self.matched_rank = -1

    def is_matched(self):
        return self.matched_program is not None

    # identity is the id only, so residents can key a dict
    def __eq__(self, other):
        return isinstance(other, Resident) and self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return "Resident({!r}, {} {})".format(self.id, self.first_name, self.last_name)


class Program:
    def __init__(self, id, name, quota, rol):
        self.id = id
        self.name = name
        self.quota = quota
        # resident ids
        self.rol = list(rol)
        self.matched_residents = []

    def member(self, resident_id):
        """True iff the resident appears in the rol of this program."""
        return resident_id in self.rol

    def rank(self, resident_id):
        """Rank of the resident in the rol, 0 is the favourite, -1 if absent."""
        for r, id in enumerate(self.rol):
            if id == resident_id:
                return r
        return -1

    def prefers(self, resident_id):
        """
        True iff at least one matched resident is ranked after resident_id.
        Does not modify the program, the caller has to remove_least_preferred() afterwards.
        """
        r = self.rank(resident_id)
        return any(self.rank(m.id) > r for m in self.matched_residents)

    def remove_least_preferred(self):
        """Remove and return the matched resident with the worst rank, None if empty."""
        if not self.matched_residents:
            return None
        worst = max(self.matched_residents, key=lambda m: self.rank(m.id))
        self.matched_residents.remove(worst)
        return worst

    def add_resident(self, resident):
        # no check here, capacity and preferences are the caller's business
        self.matched_residents.append(resident)

    def is_full(self):
        return len(self.matched_residents) >= self.quota

    def remaining(self):
        return self.quota - len(self.matched_residents)

    def __eq__(self, other):
        return isinstance(other, Program) and self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return "Program({!r}, {}, quota={})".format(self.id, self.name, self.quota)


def _duplicates(ids):
    seen, dup = set(), []
    for i in ids:
        if i in seen and i not in dup:
            dup.append(i)
        seen.add(i)
    return dup


def validate(residents, programs):
    """
    Check the preconditions of the matching, raise MalformedInput on the first violation.
    Unknown ids inside preference lists are allowed, they are never matchable.
    """
    dup = _duplicates([r.id for r in residents])
    if dup:
        raise MalformedInput("duplicate resident ids {}".format(dup))

    dup = _duplicates([p.id for p in programs])
    if dup:
        raise MalformedInput("duplicate program ids {}".format(dup))

    for p in programs:
        if p.quota < 0:
            raise MalformedInput("program {} has negative quota {}".format(p.id, p.quota))
        dup = _duplicates(p.rol)
        if dup:
            raise MalformedInput("program {} ranks {} more than once".format(p.id, dup))

    for r in residents:
        dup = _duplicates(r.rol)
        if dup:
            raise MalformedInput("resident {} ranks {} more than once".format(r.id, dup))
