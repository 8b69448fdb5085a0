import numpy as np

from records import Program, Resident

"""
Generate a "realistic" popularity profile
- some residents are intrinsically more popular
- some programs are intrinsically more popular
- some resident-program pairs share interests
We define pop[p,r] = popularity p and r give each other

Pr[p prefers r1 to r2] = pop[p,r1] / (pop[p,r1] + pop[p,r2])
Pr[r prefers p1 to p2] = pop[p1,r] / (pop[p1,r] + pop[p2,r])

Multiplying all popularity by a constant
does not change the distribution

Because we deal with large popularity, we store the log
"""


def generate_logpop(nbPrograms, nbResidents, rng=None, percent=0.05, factor=10):
    rng = np.random.default_rng(rng)
    logpop = np.zeros((nbPrograms, nbResidents))

    # step 1: some programs are intrinsically more popular
    alpha = 1
    for p in range(nbPrograms):
        logpop[p, :] += np.log(1 / (p + 1) ** alpha)

    # step 2: some residents are intrinsically more popular
    alpha = 2
    for r in range(nbResidents):
        logpop[:, r] += np.log(1 / (r + 1) ** alpha)

    # step 3: some resident-program pairs share interests
    for _ in range(int(percent * nbResidents * nbPrograms)):
        p, r = rng.integers([nbPrograms, nbResidents])
        logpop[p, r] += np.log(factor)

    return logpop


"""
Recall that we want a distribution such that
Pr[a > b] = pop[a] / (pop[a] + pop[b])

We draw without replacement with proba proportional to pop
Pr[a > b > ... > z] = pop[a] / (pop[a]+pop[b]+...+pop[z])
                    * pop[b] / (pop[b]+...+pop[z])
                    * ...
                    * pop[z] / (pop[z])
 <=> sort by increasing X[i] drawn from Exp(pop[i])
 <=> sort by increasing X[i] = -log(Unif)/pop[i]
 <=> sort by increasing Y[i] = log(-log(Unif))-log(pop[i])
"""


def draw_pref(logpop, rng=None):
    rng = np.random.default_rng(rng)
    n = len(logpop)
    y = np.log(-np.log(rng.random(n)))
    return sorted(range(n), key=lambda i: y[i] - logpop[i])


def draw_profile(logpop, rng=None):
    rng = np.random.default_rng(rng)
    nbPrograms, nbResidents = logpop.shape
    prefP = [draw_pref(logpop[p, :], rng) for p in range(nbPrograms)]
    prefR = [draw_pref(logpop[:, r], rng) for r in range(nbResidents)]
    return prefP, prefR


def program_id(p):
    return "P{:03d}".format(p)


def resident_id(r):
    return r + 1


"""
turn full preference profiles into records
- residents keep their nb_wishes favourite programs
- programs rank at most nb_auditions residents, among those who applied to them
"""
def build_instance(prefP, prefR, quotas, nb_wishes=None, nb_auditions=None):
    wishes = [pr[:nb_wishes] for pr in prefR]

    programs = []
    for p, pr in enumerate(prefP):
        auditions = [r for r in pr if p in wishes[r]][:nb_auditions]
        programs.append(
            Program(
                program_id(p),
                "Program {}".format(p),
                int(quotas[p]),
                [resident_id(r) for r in auditions],
            )
        )

    residents = [
        Resident(
            resident_id(r),
            "First{}".format(r),
            "Last{}".format(r),
            [program_id(p) for p in pr],
        )
        for r, pr in enumerate(wishes)
    ]
    return residents, programs
