import pytest


SAMPLE_LOG = """cookie,timestamp
AtY0laUfhglK3lC7,2018-12-09T14:19:00+00:00
SAZuXPGUrfbcn5UA,2018-12-09T10:13:00+00:00
5UAVanZf6UtGyKVS,2018-12-09T07:25:00+00:00
AtY0laUfhglK3lC7,2018-12-09T06:19:00+00:00
SAZuXPGUrfbcn5UA,2018-12-08T22:03:00+00:00
4sMM2LxV07bPJzwf,2018-12-08T21:30:00+00:00
"""


@pytest.fixture
def sample_log(tmp_path):
    path = tmp_path / "cookie_log.csv"
    path.write_text(SAMPLE_LOG, encoding="utf-8")
    return path
