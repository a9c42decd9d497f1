from phraselint.result import Err, Ok
from phraselint.schemas import NoEntryDirError

def test_ok():
    result = Ok({"key": []})
    assert result.is_ok()
    assert not result.is_err()
    assert result.value == {"key": []}

def test_err():
    result = Err(NoEntryDirError(dir="/tmp/nowhere"))
    assert result.is_err()
    assert not result.is_ok()
    assert result.error.code == 9
    assert result.error.message == "Entry directory does not exist"
