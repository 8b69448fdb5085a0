"""
resident-proposing deferred acceptance with program quotas
takes as input (possibly incomplete) preference lists
"""

import logging
from collections import deque

from records import validate

logger = logging.getLogger(__name__)


class MatchResult:
    """
    matches maps each matched resident to its program, unmatched_residents holds the others.
    residents and programs are the registries used by the run, shared and not copied,
    so reading them gives the final state of the matching.
    """

    def __init__(self, matches, unmatched_residents, residents, programs):
        self.matches = matches
        self.unmatched_residents = unmatched_residents
        self.residents = residents
        self.programs = programs

    def nb_unmatched(self):
        return len(self.unmatched_residents)

    def nb_positions_available(self):
        return sum(p.remaining() for p in self.programs)


def match_resident_to_program(resident, program):
    program.add_resident(resident)
    resident.match(program)


def deferred_acceptance(residents, programs, check=True):
    residents = list(residents)
    if check:
        validate(residents, programs)

    # programs by id, unknown ids in a resident's rol are skipped
    programsById = {p.id: p for p in programs}

    # residents waiting to propose, evicted residents go at the back
    pool = deque(residents)
    unmatched = []

    logger.info(
        "matching %d residents to %d programs", len(residents), len(programsById)
    )

    nb_proposals = 0
    while pool:
        resident = pool.popleft()

        # walk the whole rol from the top, even after an eviction
        for program_id in resident.rol:
            program = programsById.get(program_id)
            if program is None or not program.member(resident.id):
                continue

            nb_proposals += 1

            if not program.is_full():
                match_resident_to_program(resident, program)
                break

            if program.prefers(resident.id):
                evicted = program.remove_least_preferred()
                evicted.unmatch()
                pool.append(evicted)
                logger.debug(
                    "program %s takes resident %s, resident %s is evicted",
                    program.id,
                    resident.id,
                    evicted.id,
                )
                match_resident_to_program(resident, program)
                break

        if not resident.is_matched():
            unmatched.append(resident)

    matches = {r: r.matched_program for r in residents if r.is_matched()}

    logger.info(
        "%d residents matched, %d unmatched after %d proposals",
        len(matches),
        len(unmatched),
        nb_proposals,
    )

    return MatchResult(matches, unmatched, residents, list(programsById.values()))


def blocking_pairs(result):
    """
    pairs (resident, program) that would both rather be matched together
    the matching is stable iff the list is empty
    """
    programsById = {p.id: p for p in result.programs}
    pairs = []
    for resident in result.residents:
        for program_id in resident.rol:
            program = programsById.get(program_id)
            if program is not None and program == resident.matched_program:
                # every program after this one is worse for the resident
                break
            if program is None or not program.member(resident.id):
                continue
            if not program.is_full() or program.prefers(resident.id):
                pairs.append((resident, program))
    return pairs
