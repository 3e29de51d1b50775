from .entry import Entry

# Format used by `ls`: name (link) username password
LIST_FORMAT = "%N (%L) %U %P"

PLACEHOLDERS = {
    "N": "name",
    "L": "link",
    "U": "username",
    "P": "password",
}


def render(template: str, entry: Entry) -> str:
    """Expand %N, %L, %U and %P in ``template`` with the entry's fields.

    Any other character after "%" is kept as-is together with the "%",
    and a trailing "%" is kept too.
    """
    out = []
    chars = iter(template)
    for c in chars:
        if c != "%":
            out.append(c)
            continue
        nxt = next(chars, None)
        if nxt is None:
            out.append(c)
            break
        attr = PLACEHOLDERS.get(nxt)
        if attr:
            out.append(getattr(entry, attr))
        else:
            out.append(c + nxt)
    return "".join(out)
