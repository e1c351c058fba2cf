from repo_tracker.schemas import Repository
from repo_tracker.errors import DuplicateURLError, RepositoryNotFoundError, RepositoryStoreError


def test_has_tech_matches_whole_tag_ignoring_case():
    repo = Repository(id="1", title="t", url="u", techs=["Node.js", "React"])
    assert repo.has_tech("react") is True
    assert repo.has_tech("REACT") is True
    assert repo.has_tech("node") is False   # partial tag

def test_has_tech_without_tags():
    assert Repository(id="1", title="t", url="u").has_tech("node") is False

def test_title_contains_is_case_insensitive():
    repo = Repository(id="1", title="My Awesome Repo", url="u")
    assert repo.title_contains("awesome") is True
    assert repo.title_contains("REPO") is True
    assert repo.title_contains("other") is False

def test_copy_does_not_share_techs():
    repo = Repository(id="1", title="t", url="u", techs=["Go"], likes=2)
    clone = repo.copy()
    clone.techs.append("Rust")
    assert clone == Repository(id="1", title="t", url="u", techs=["Go", "Rust"], likes=2)
    assert repo.techs == ["Go"]

def test_error_payloads():
    assert RepositoryNotFoundError("abc").to_dict() == {"code": "001", "reason": "Repository not found."}
    assert DuplicateURLError("http://a.com").to_dict() == {
        "code": "002",
        "reason": "This url is already included before.",
    }
    assert issubclass(DuplicateURLError, RepositoryStoreError)
    assert "abc" in str(RepositoryNotFoundError("abc"))
