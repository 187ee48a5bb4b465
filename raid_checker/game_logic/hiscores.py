# raid_checker/game_logic/hiscores.py
from raid_checker import config
from raid_checker.classes.player import SkillRecord
from raid_checker.errors import ParseError
from raid_checker.game_logic import experience as experience_curve


def _parse_int_field(field, line_number, raw_line):
    text = field.strip()
    try:
        return int(text)
    except ValueError:
        raise ParseError(ParseError.MALFORMED_RECORD, f"'{raw_line}' has a non-numeric field '{text}'.", line_number) from None


def parse_skill_line(raw_line: str, line_number: int, skill_name: str = None) -> SkillRecord:
    """Parses one 'rank,level,experience' line."""
    fields = raw_line.split(",")
    if len(fields) != 3:
        raise ParseError(ParseError.MALFORMED_RECORD, f"expected 3 fields, got {len(fields)} in '{raw_line}'.", line_number)
    rank, level, experience = (_parse_int_field(field, line_number, raw_line) for field in fields)

    if rank == config.HISCORE_UNRANKED:
        rank = None
    elif rank < 1:
        raise ParseError(ParseError.MALFORMED_RECORD, f"invalid rank {rank}.", line_number)

    if skill_name == "overall":
        # Total level and total experience; not on the per-skill curve.
        if level == config.HISCORE_UNRANKED and rank is None:
            level = 0
        elif level < 0:
            raise ParseError(ParseError.MALFORMED_RECORD, f"negative total level {level}.", line_number)
        if experience < 0:
            if experience != config.HISCORE_UNRANKED or rank is not None:
                raise ParseError(ParseError.MALFORMED_RECORD, f"negative experience {experience}.", line_number)
            experience = 0
        return SkillRecord(rank, level, experience)

    if not config.MIN_LEVEL <= level <= config.MAX_LEVEL:
        raise ParseError(ParseError.MALFORMED_RECORD, f"level {level} outside {config.MIN_LEVEL}..{config.MAX_LEVEL}.", line_number)
    if experience == config.HISCORE_UNRANKED and rank is None:
        # Unranked skills report no experience; use the floor of the reported level.
        experience = experience_curve.experience_for(level)
    elif experience < 0:
        raise ParseError(ParseError.MALFORMED_RECORD, f"negative experience {experience}.", line_number)
    return SkillRecord(rank, level, experience)


def parse_hiscores(raw_text: str) -> dict:
    """Parses an index_lite payload into {skill_name: SkillRecord}.

    Lines are matched to skills purely by position (config.HISCORE_SKILL_ORDER).
    Anything after the skill block (activities, bosses) is ignored.
    """
    if not isinstance(raw_text, str):
        raise ParseError(ParseError.MALFORMED_RECORD, f"payload must be text, got {type(raw_text).__name__}.")
    lines = raw_text.strip().splitlines()
    if len(lines) < config.HISCORE_MIN_SKILL_LINES:
        raise ParseError(ParseError.TRUNCATED, f"expected at least {config.HISCORE_MIN_SKILL_LINES} skill lines, got {len(lines)}.")

    records = {}
    for index, skill_name in enumerate(config.HISCORE_SKILL_ORDER):
        if index >= len(lines):
            break
        records[skill_name] = parse_skill_line(lines[index].strip(), index + 1, skill_name)
    return records
