import logging

import pandas as pd

from records import MalformedInput, Program, Resident

logger = logging.getLogger(__name__)

RESIDENT_COLUMNS = ["residentID", "firstname", "lastname", "rol"]
PROGRAM_COLUMNS = ["programID", "name", "quota", "rol"]
RESULT_COLUMNS = ["lastname", "firstname", "residentID", "programID", "name"]

"""marks unmatched residents in the result file"""
NO_PROGRAM_ID = "XXX"
NO_PROGRAM_NAME = "NOT_MATCHED"


"""convert a quoted rank order list such as [NRS,BBB] to a list of strings"""
def parse_rol(rol_str):
    rol_str = str(rol_str).strip()
    if rol_str.startswith("[") and rol_str.endswith("]"):
        rol_str = rol_str[1:-1]
    return [x.strip() for x in rol_str.split(",") if x.strip() != ""]


def to_int(value, what, filename):
    try:
        return int(str(value).strip())
    except ValueError:
        raise MalformedInput("{}: invalid {} '{}'".format(filename, what, value))


"""
read a comma separated file with a header line and 4 columns
the last column is a quoted list, the columns are renamed by position
"""
def read_table(filename, columns):
    try:
        df = pd.read_csv(
            filename, sep=",", dtype=str, keep_default_na=False, skipinitialspace=True
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=columns)
    except pd.errors.ParserError as e:
        raise MalformedInput(
            "{}: {} (rank order lists must be quoted)".format(filename, e)
        ) from e

    # one more field than the header on every row makes pandas use the first column as index
    if len(df) > 0 and not isinstance(df.index, pd.RangeIndex):
        raise MalformedInput(
            "{}: more fields than columns, rank order lists must be quoted".format(filename)
        )

    if df.shape[1] != len(columns):
        raise MalformedInput(
            "{}: expected {} columns, found {}".format(filename, len(columns), df.shape[1])
        )
    df.columns = columns

    # missing trailing fields are read as "", an empty list is written "[]"
    incomplete = df["rol"].str.strip() == ""
    if incomplete.any():
        line = 2 + int(incomplete.to_numpy().nonzero()[0][0])
        raise MalformedInput("{}: invalid line format at line {}".format(filename, line))

    return df


def load_residents(filename):
    df = read_table(filename, RESIDENT_COLUMNS)
    residents = [
        Resident(
            to_int(row.residentID, "resident id", filename),
            row.firstname,
            row.lastname,
            parse_rol(row.rol),
        )
        for row in df.itertuples(index=False)
    ]
    logger.info("loaded %d residents from %s", len(residents), filename)
    return residents


def load_programs(filename):
    df = read_table(filename, PROGRAM_COLUMNS)
    programs = [
        Program(
            row.programID.strip(),
            row.name,
            to_int(row.quota, "quota", filename),
            [to_int(id, "resident id", filename) for id in parse_rol(row.rol)],
        )
        for row in df.itertuples(index=False)
    ]
    logger.info("loaded %d programs from %s", len(programs), filename)
    return programs


"""one line per resident, the matched ones first"""
def result_frame(result):
    rows = []
    for resident, program in result.matches.items():
        rows.append(
            [resident.last_name, resident.first_name, resident.id, program.id, program.name]
        )
    for resident in result.unmatched_residents:
        rows.append(
            [resident.last_name, resident.first_name, resident.id, NO_PROGRAM_ID, NO_PROGRAM_NAME]
        )
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def write_result(result, f):
    result_frame(result).to_csv(f, index=False, lineterminator="\n")
    f.write("\n")
    f.write("Number of unmatched residents: {}\n".format(result.nb_unmatched()))
    f.write("Number of positions available: {}\n".format(result.nb_positions_available()))
