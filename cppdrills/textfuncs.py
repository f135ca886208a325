"""Small string utilities: ASCII letter checks, concatenation, palindromes, path normalisation."""

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)


def _code(c: str) -> int:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def is_alpha(c: str) -> bool:
    """Return True if ``c`` is a Latin letter (A-Z or a-z)."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def to_lower(c: str) -> str:
    """Turn an upper-case Latin letter into lower case; return anything else unchanged."""
    code = _code(c)
    if code in _UPPER:
        return chr(code + 32)
    return c


def concat(lhs: str, rhs: str) -> str:
    """Return a new string made of ``lhs`` followed by ``rhs``."""
    return f"{lhs}{rhs}"


def is_palindrome(s: str) -> bool:
    """Check whether the Latin letters of ``s`` read the same both ways, ignoring case."""
    letters = [to_lower(ch) for ch in s if is_alpha(ch)]
    return letters == letters[::-1]


def _is_lower_letter(ch: str) -> bool:
    return "a" <= ch <= "z"


def _drop_parent_after_word(ans: str) -> str:
    # Only applies to paths that start with a lower-case name.
    if len(ans) <= 2 or not _is_lower_letter(ans[0]):
        return ans
    k = 0
    while k < len(ans) - 3:
        if k != 0 and ans[k:k + 3] == "/..":
            ans = ans[:k + 1] + ans[k + 3:]
        k += 1
    return ans


def _drop_parent_after_letters(ans: str) -> str:
    r = 0
    letters_seen = 0
    while r < len(ans) - 2:
        if _is_lower_letter(ans[r]):
            letters_seen += 1
        if letters_seen > 0 and ans[r:r + 2] == "..":
            ans = ans[:r] + ans[r + 2:]
        r += 1
    return ans


def _collapse_repeated_words(ans: str) -> str:
    u = 0
    while u < len(ans):
        if not _is_lower_letter(ans[u]):
            u += 1
            continue
        start = u
        while u < len(ans) and ans[u] not in "/.":
            u += 1
        word = ans[start:u]
        u += 1
        pattern = f"{word}/{word}"
        while (pos := ans.find(pattern)) != -1:
            ans = ans[:pos] + ans[pos + len(word) + 1:]
    return ans


def normalize(path: str) -> str:
    """Shorten a Unix path: collapse ``//``, ``.`` and ``..`` where they can be removed."""
    ans = str(path)
    if ans == ".":
        return "."

    ans = _drop_parent_after_word(ans)
    ans = _drop_parent_after_letters(ans)

    while "//" in ans:
        ans = ans.replace("//", "/", 1)
    while "/./" in ans:
        ans = ans.replace("/./", "/", 1)
    while ans.startswith("/../"):
        ans = "/" + ans[4:]

    pos = ans.find("/.")
    if pos != -1 and pos == len(ans) - 2:
        ans = ans[:pos + 1] + ans[pos + 2:]

    if len(ans) > 2 and ans.endswith(".."):
        pos = ans.find("..")
        ans = ans[:pos] + ans[pos + 2:]

    ans = _collapse_repeated_words(ans)

    if len(ans) > 1 and ans.endswith("/"):
        ans = ans[:-1]
    return ans