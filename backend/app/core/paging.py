# app/core/paging.py


def page_offset(from_: int, size: int) -> int:
    """
    Offset of the page containing item `from_`.
    Pages are aligned to `size`, so from_=5,size=10 starts at 0, not 5.
    """
    return (from_ // size) * size
