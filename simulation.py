import logging
import sys as sys

import numpy as np

import da
import popularities as pop
from logger import get_logger

logger = logging.getLogger(__name__)

DEFAULT_PARAMS = {
    "nb_programs": 40,
    "nb_residents": 100,
    "quota": 2,
    "nb_wishes": 6,
    "nb_auditions": 12,
}


"""rank of the matched program in each resident's own list, None if unmatched"""
def resident_choice_ranks(result):
    return [
        r.rol.index(r.matched_program.id) if r.is_matched() else None
        for r in result.residents
    ]


def rank_statistics(result):
    ranks = resident_choice_ranks(result)
    matched_ranks = [x for x in ranks if x is not None]
    program_ranks = [r.matched_rank for r in result.matches]

    return {
        "nb_residents": len(ranks),
        "nb_matched": len(matched_ranks),
        "nb_unmatched": result.nb_unmatched(),
        "matched_to_first": matched_ranks.count(0),
        "matched_to_second": matched_ranks.count(1),
        "matched_to_third": matched_ranks.count(2),
        # ranks are displayed starting from 1
        "avg_resident_rank": 1 + np.average(matched_ranks) if matched_ranks else None,
        "avg_program_rank": 1 + np.average(program_ranks) if program_ranks else None,
        "nb_positions": sum(p.quota for p in result.programs),
        "nb_positions_available": result.nb_positions_available(),
    }


def print_result(result, file=sys.stdout):
    stats = rank_statistics(result)

    print("Matching efficiency", file=file)
    print(
        "\tResidents matched {} / {}.".format(stats["nb_matched"], stats["nb_residents"]),
        file=file,
    )
    print(
        "\tPositions filled {} / {}.".format(
            stats["nb_positions"] - stats["nb_positions_available"], stats["nb_positions"]
        ),
        file=file,
    )
    print("\n", file=file)
    print("Residents preferences", file=file)
    print("\tMatched to their favourite program {}.".format(stats["matched_to_first"]), file=file)
    print("\tMatched to their second program {}.".format(stats["matched_to_second"]), file=file)
    print("\tMatched to their third program {}.".format(stats["matched_to_third"]), file=file)
    if stats["avg_resident_rank"] is not None:
        print(
            "\tAverage rank of the matched program {:.2f}.".format(stats["avg_resident_rank"]),
            file=file,
        )
    if stats["avg_program_rank"] is not None:
        print("\n", file=file)
        print("Programs preferences", file=file)
        print(
            "\tAverage rank of the matched residents {:.2f}.".format(stats["avg_program_rank"]),
            file=file,
        )

    print("\n", file=file)
    print("Programs with positions left:\n", file=file)
    for p in sorted(result.programs, key=lambda p: -p.remaining()):
        if p.remaining() > 0:
            print(
                "'{}' \t: {} / {} position(s) left.".format(
                    p.name[:60].ljust(60), p.remaining(), p.quota
                ),
                file=file,
            )


def quotas_of(params):
    quota = params["quota"]
    if np.isscalar(quota):
        return [quota] * params["nb_programs"]
    return list(quota)


def run_experiment(params, rng=None):
    rng = np.random.default_rng(rng)

    # generates a matrix of log pop
    logpop = pop.generate_logpop(params["nb_programs"], params["nb_residents"], rng)

    # draws full preferences
    prefP, prefR = pop.draw_profile(logpop, rng)

    # truncate the preferences and build the records
    residents, programs = pop.build_instance(
        prefP, prefR, quotas_of(params), params["nb_wishes"], params["nb_auditions"]
    )

    result = da.deferred_acceptance(residents, programs)

    blocking = da.blocking_pairs(result)
    if blocking:
        logger.error("unstable matching, %d blocking pairs", len(blocking))

    return result, len(blocking)


def run_experiments(params, nb_runs, seed=None):
    rng = np.random.default_rng(seed)
    nb_matched_stats = []
    nb_blocking_stats = []
    for i in range(nb_runs):
        result, nb_blocking = run_experiment(params, rng)
        nb_matched_stats.append(len(result.matches))
        nb_blocking_stats.append(nb_blocking)
        logger.debug("run %d: %d matched", i, len(result.matches))

    return {
        "nb_runs": nb_runs,
        "min_matched": int(np.min(nb_matched_stats)),
        "avg_matched": float(np.average(nb_matched_stats)),
        "max_matched": int(np.max(nb_matched_stats)),
        "nb_unstable": sum(1 for b in nb_blocking_stats if b > 0),
    }


if __name__ == "__main__":
    get_logger()
    nb_runs = 100
    if len(sys.argv) == 2:
        nb_runs = int(sys.argv[1])
    elif len(sys.argv) > 2:
        print("Usage: {} [nb_runs] ".format(sys.argv[0]), file=sys.stderr)
        sys.exit(1)

    params = DEFAULT_PARAMS
    result, _ = run_experiment(params, 0)
    print_result(result)

    stats = run_experiments(params, nb_runs, 1)
    print(
        "Statistics on {} experiments [min,avg,max] matched [{},{:.1f},{}] for {} residents\n".format(
            nb_runs,
            stats["min_matched"],
            stats["avg_matched"],
            stats["max_matched"],
            params["nb_residents"],
        ),
        file=sys.stderr,
    )
    print("Unstable runs {}".format(stats["nb_unstable"]), file=sys.stderr)
