# src/showcase/sources/github/filters.py


def is_listable_repo(repo) -> bool:
    """
    Portfolio listing filter: public, original, active repositories only
    """
    if repo.private:
        return False
    if repo.fork or repo.archived:
        return False
    return True
