from __future__ import annotations

import pytest

from path_utils import (
    build_directory_payload,
    extract_file_name,
    file_name_matches,
    find_common_ancestor,
    get_dir_selector,
    get_parent_path,
    get_path_chain,
    is_ancestor_or_self,
    plan_navigation,
)


def test_parent_of_top_level_directory_is_root() -> None:
    assert get_parent_path("2024") == ""
    assert get_parent_path("2024/spring/sale") == "2024/spring"


def test_ancestor_check_is_segment_wise() -> None:
    assert is_ancestor_or_self("", "2024")
    assert is_ancestor_or_self("2024", "2024")
    assert is_ancestor_or_self("2024", "2024/spring")
    assert not is_ancestor_or_self("20", "2024")
    assert not is_ancestor_or_self("2024/spr", "2024/spring")


def test_common_ancestor_of_siblings() -> None:
    assert find_common_ancestor("2023/winter", "2023/spring/sale") == "2023"
    assert find_common_ancestor("2023", "2024") == ""
    assert find_common_ancestor("a/b/c", "a/b") == "a/b"


def test_path_chain_excludes_ancestor() -> None:
    assert get_path_chain("", "a/b/c") == ["a", "a/b", "a/b/c"]
    assert get_path_chain("a", "a/b/c") == ["a/b", "a/b/c"]
    assert get_path_chain("a/b", "a/b") == []


def test_plan_from_root_opens_every_level() -> None:
    assert plan_navigation("", "2024/spring") == ([], "", ["2024", "2024/spring"])


def test_plan_between_cousins() -> None:
    close_paths, ancestor, open_paths = plan_navigation("2023/winter/x", "2023/spring/sale")

    assert close_paths == ["2023/winter/x", "2023/winter"]
    assert ancestor == "2023"
    assert open_paths == ["2023/spring", "2023/spring/sale"]


def test_plan_to_same_path_is_empty() -> None:
    assert plan_navigation("a/b", "a/b") == ([], "a/b", [])


def test_plan_up_reopens_the_target_only() -> None:
    close_paths, ancestor, open_paths = plan_navigation("a/b/c", "a")

    assert close_paths == ["a/b/c", "a/b"]
    assert ancestor == "a"
    assert open_paths == ["a"]


def test_plan_to_root() -> None:
    assert plan_navigation("a/b", "") == (["a/b", "a"], "", [""])


def test_plan_never_reopens_shared_ancestor() -> None:
    _, ancestor, open_paths = plan_navigation("x/y/old", "x/y/new/deeper")

    assert ancestor == "x/y"
    assert ancestor not in open_paths
    assert all(path.startswith(ancestor + "/") for path in open_paths)


def test_dir_selector() -> None:
    assert get_dir_selector("") == "[directory]"
    assert get_dir_selector("2024/spring") == '[directory="2024/spring"]'
    assert get_dir_selector('say "hi"') == '[directory="say \\"hi\\""]'


def test_directory_payload_is_form_encoded() -> None:
    assert build_directory_payload("2024/spring") == "directory=2024%2Fspring"
    assert build_directory_payload("") == "directory="
    assert build_directory_payload("summer sale") == "directory=summer+sale"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("dog.jpg", "dog.jpg"),
        ("dog", "dog"),
        ("/tmp/uploads/dog.jpg", "dog.jpg"),
        ("C:\\images\\cat.png", "cat.png"),
        ("images/", None),
    ],
)
def test_extract_file_name(value: str, expected) -> None:
    assert extract_file_name(value) == expected


def test_file_name_matching_allows_missing_extension_only() -> None:
    assert file_name_matches("dog.jpg", "dog")
    assert file_name_matches("dog.jpg", "dog.jpg")
    assert not file_name_matches("dog.jpg", "do")
    assert not file_name_matches("doghouse.jpg", "dog")
