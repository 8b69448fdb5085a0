import sys as sys

import da
import data
from logger import get_logger
from records import MalformedInput


def main(argv, out=sys.stdout, err=sys.stderr):
    if len(argv) != 3:
        print("Usage: {} <residentsFile> <programsFile>".format(argv[0]), file=err)
        return 1

    logger = get_logger()
    residents_file, programs_file = argv[1], argv[2]

    try:
        residents = data.load_residents(residents_file)
        programs = data.load_programs(programs_file)
        result = da.deferred_acceptance(residents, programs)
    except (OSError, MalformedInput) as e:
        logger.debug("run aborted", exc_info=True)
        print("Error: {}".format(e), file=err)
        return 1

    data.write_result(result, out)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
