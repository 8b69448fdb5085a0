import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.backends.backend_pdf import PdfPages

import da
import popularities as pop
from logger import get_logger
from simulation import resident_choice_ranks

nbPrograms, nbResidents, quota = 30, 80, 2

"""
In each scenario:
- we let residents apply to their top X programs
- we let programs rank their top Y applicants
"""
scenarios = [
    ("Scenario 1", int(0.15 * nbPrograms), 8),
    ("Scenario 2", int(0.15 * nbPrograms), nbResidents),
    ("Scenario 3", nbPrograms, 8),
    ("Scenario 4", nbPrograms, nbResidents),
]


def plot_scenarios(
    filename="fig.pdf",
    scenarios=scenarios,
    nbPrograms=nbPrograms,
    nbResidents=nbResidents,
    seed=None,
):
    rng = np.random.default_rng(seed)

    logpop = pop.generate_logpop(nbPrograms, nbResidents, rng)
    prefP, prefR = pop.draw_profile(logpop, rng)
    quotas = [quota] * nbPrograms

    results = []
    with PdfPages(filename) as pdf:
        for name, nb_wishes, nb_auditions in scenarios:
            residents, programs = pop.build_instance(
                prefP, prefR, quotas, nb_wishes, nb_auditions
            )
            result = da.deferred_acceptance(residents, programs)
            results.append((name, result))

            cmap = mpl.colormaps["viridis"]
            norm = mpl.colors.Normalize(vmin=logpop.min(), vmax=logpop.max())

            #####################################

            plt.figure(figsize=(6, 5), tight_layout=True)
            plt.title(name)

            plt.imshow(logpop, origin="lower", norm=norm, cmap=cmap)
            plt.xlabel("residents")
            plt.ylabel("programs")
            plt.colorbar()

            # program ids are P000, P001, ... in row order
            row = {p.id: i for i, p in enumerate(programs)}
            for s, r in enumerate(residents):
                if r.is_matched():
                    plt.plot([s], [row[r.matched_program.id]], "r.", markersize=3)
                else:
                    plt.plot([s], [nbPrograms], "r.", markersize=3)
            for i, p in enumerate(programs):
                if p.remaining() > 0:
                    plt.plot([nbResidents], [i], "r.", markersize=3)

            plt.xlim((-0.5, nbResidents + 0.5))
            plt.ylim((-0.5, nbPrograms + 0.5))

            pdf.savefig()
            plt.close()

            #####################################
            plt.figure(figsize=(10, 3), tight_layout=True)

            ax = plt.subplot(1, 2, 1)
            ax.title.set_text("Apply to %d programs, %d auditions" % (nb_wishes, nb_auditions))

            YR = sorted([len(r.rol) for r in residents], reverse=True)
            YP = sorted([len(p.rol) for p in programs], reverse=True)
            plt.plot(YR, label="length of residents' lists")
            plt.plot(YP, label="length of programs' lists")
            plt.ylim(bottom=0)
            plt.legend()

            ax = plt.subplot(1, 2, 2)
            ax.title.set_text("Rank of the matched program")

            ranks = [1 + x for x in resident_choice_ranks(result) if x is not None]
            plt.hist(ranks, bins=range(1, nb_wishes + 2), align="left")
            plt.xlabel("choice")
            plt.ylabel("residents")

            pdf.savefig()
            plt.close()

    return results


if __name__ == "__main__":
    get_logger()
    plot_scenarios("fig.pdf")
