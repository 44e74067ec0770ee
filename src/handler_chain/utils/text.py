def normalize_tag(tag, case_sensitive=True):
    """
    Normalize a request tag read from the command line

    "  a \n" -> "a", or "A" when case_sensitive is False

    :param tag: raw tag
    :param case_sensitive: keep the tag's case
    :return: normalized tag
    """
    tag = tag.strip()
    return tag if case_sensitive else tag.upper()
