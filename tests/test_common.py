import threading
import time
from datetime import date, datetime, timedelta

import pytest

from logengine import common


def test_round_value_half_rounds_away_from_zero():
    assert common.round_value(1.25, 1) == 1.3
    assert common.round_value(-1.25, 1) == -common.round_value(1.25, 1)


def test_round_value_exact_value_unchanged():
    assert common.round_value(3.0, 2) == 3.0
    assert common.round_value(-7.0, 0) == -7.0


def test_round_value_truncates_below_half():
    assert common.round_value(1.24, 1) == pytest.approx(1.2)


def test_round_value_negative_precision():
    assert common.round_value(1500.0, -3) == pytest.approx(2000.0)


@pytest.mark.parametrize("value,size", [(42, 5), (-7, 4), (12345, 2), (0, 0)])
def test_int_to_str_field(value, size):
    result = common.int_to_str(value, size)
    assert len(result) == max(size, len(str(value)))
    assert result.rstrip(" ") == str(value)
    assert int(result) == value


def test_int_to_str_default():
    assert common.int_to_str(-7) == "-7"


def test_float_to_str_six_digits():
    assert common.float_to_str(1.5) == "1.500000"
    text = common.float_to_str(-3.25)
    assert len(text.split(".")[1]) == 6
    assert float(text) == -3.25


@pytest.mark.parametrize("flag", [True, False])
def test_bool_round_trip(flag):
    assert common.str_to_bool(common.bool_to_str(flag)) is flag


def test_bool_to_str_values():
    assert common.bool_to_str(True) == "1"
    assert common.bool_to_str(False) == "0"


@pytest.mark.parametrize("text", ["1", "yes", "YES", "True", "tRuE"])
def test_str_to_bool_true(text):
    assert common.str_to_bool(text) is True


@pytest.mark.parametrize("text", ["", "0", "no", "false", "yess", "2"])
def test_str_to_bool_false(text):
    assert common.str_to_bool(text) is False


@pytest.mark.parametrize(
    "path", ["dir/file.txt", "a\\b\\c.log", "plain", "dir/", "/root", "mix/ed\\name.x", ""]
)
def test_dir_and_name_join_back(path):
    name = common.extract_file_name(path)
    directory = common.extract_file_dir(path)
    assert directory + name == path
    assert "/" not in name and "\\" not in name


def test_extract_file_name_last_component():
    assert common.extract_file_name("a/b\\c.txt") == "c.txt"
    assert common.extract_file_dir("plain") == ""


def test_strip_file_ext():
    assert common.strip_file_ext("logs/app.log") == "logs/app"
    assert common.strip_file_ext("dir.d/file") == "dir.d/file"
    assert common.strip_file_ext("dir.d\\file") == "dir.d\\file"
    assert common.strip_file_ext("") == ""


def test_strip_file_ext_only_last_dot():
    assert common.strip_file_ext("a/b.tar.gz") == "a/b.tar"


def test_string_replace_all_occurrences():
    result = common.string_replace("a-b-c", "-", "+")
    assert "-" not in result
    assert result.count("+") == 2
    assert result.replace("+", "-") == "a-b-c"


def test_string_replace_empty_inputs():
    assert common.string_replace("", "x", "y") == ""
    assert common.string_replace("abc", "", "y") == ""


def test_string_replace_no_match():
    assert common.string_replace("abc", "zz", "y") == "abc"


def test_del_crlf():
    assert common.del_crlf("\r\nabc\r\n") == "abc"
    assert common.del_crlf("a\nb") == "a\nb"


def test_trim_family():
    assert common.trim(" \t abc \t") == "abc"
    assert common.trim_left(" \tabc ") == "abc "
    assert common.trim_right(" abc\t ") == " abc"
    assert common.trim("   ") == ""
    assert common.trim_sp_crlf(" \r\nabc\t\n") == "abc"


def test_equal_ncase():
    assert common.equal_ncase("Hello", "hELLO")
    assert common.equal_ncase("", "")
    assert not common.equal_ncase("", "a")
    assert not common.equal_ncase("abc", "ab")


@pytest.mark.parametrize(
    "a,b", [("abc", "ABD"), ("", "a"), ("ab", "abc"), ("Zeta", "alpha"), ("x", "X")]
)
def test_compare_ncase_antisymmetric(a, b):
    assert common.compare_ncase(a, b) == -common.compare_ncase(b, a)
    assert common.compare_ncase(a, a) == 0


def test_compare_ncase_values():
    assert common.compare_ncase("", "") == 0
    assert common.compare_ncase("", "a") == -1
    assert common.compare_ncase("a", "") == 1
    assert common.compare_ncase("ABC", "abd") == -1
    assert common.compare_ncase("abc", "ab") == 1
    assert common.compare_ncase("MiXeD", "mixed") == 0


@pytest.mark.parametrize("text,expected", [("123", True), ("+5", True), ("0", True),
                                           ("-5", False), ("", False), ("12a", False),
                                           ("1.0", False)])
def test_is_uint(text, expected):
    assert common.is_uint(text) is expected


def test_str_to_lower():
    assert common.str_to_lower("MiXeD Case") == "mixed case"


def test_date_time_to_str_round_trip_timestamp():
    stamp = 1_000_000_000
    text = common.date_time_to_str(stamp)
    parsed = datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
    assert time.mktime(parsed.timetuple()) == stamp


def test_date_time_to_str_struct_and_datetime_agree():
    moment = datetime(2024, 3, 5, 7, 8, 9)
    assert common.date_time_to_str(moment) == common.date_time_to_str(moment.timetuple())
    assert datetime.strptime(common.date_time_to_str(moment), "%Y-%m-%d %H:%M:%S") == moment


def test_current_time_point_is_now():
    assert abs(common.get_curr_time_point() - datetime.now()) < timedelta(seconds=5)


def test_current_date_time_fields():
    current = common.get_curr_date_time()
    assert abs(time.mktime(current) - time.time()) < 5


def test_current_date_string_is_today():
    before = date.today()
    parsed = datetime.strptime(common.get_curr_date_as_string(), "%d-%m-%Y").date()
    assert parsed in (before, before + timedelta(days=1))


def test_current_time_string_has_millis():
    text = common.get_curr_time_as_string()
    assert text[-4] == "."
    assert 0 <= int(text[-3:]) <= 999


def test_current_date_time_string_non_empty():
    assert len(common.get_curr_date_time_as_string()) > 0


def test_format_curr_date_time_year():
    before = time.localtime().tm_year
    year = int(common.format_curr_date_time("%Y"))
    assert year in (before, before + 1)


def test_thread_id_stable_and_distinct():
    own = common.get_thread_id()
    assert common.get_thread_id() == own
    seen = []
    worker = threading.Thread(target=lambda: seen.append(common.get_thread_id()))
    worker.start()
    worker.join()
    assert len(seen) == 1
    assert seen[0] != own