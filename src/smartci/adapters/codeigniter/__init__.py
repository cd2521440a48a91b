"""CodeIgniter 3 model navigation.

Load-statement parsing, project layout discovery, model file resolution and
method lookup for ``$this->load->model(...)`` style code.
"""

from smartci.adapters.codeigniter.file_resolver import (
    candidate_paths,
    find_model_file,
    split_model_path,
)
from smartci.adapters.codeigniter.load_parser import find_model_load, parse_model_loads
from smartci.adapters.codeigniter.method_locator import (
    extract_comment,
    extract_declaration,
    find_method_in_file,
    find_method_in_lines,
)
from smartci.adapters.codeigniter.naming import capitalize_first, convention_file_name
from smartci.adapters.codeigniter.roots import (
    find_app_roots,
    path_exists,
    resolve_project_root,
    sort_app_dirs,
)

__all__ = [
    "candidate_paths",
    "capitalize_first",
    "convention_file_name",
    "extract_comment",
    "extract_declaration",
    "find_app_roots",
    "find_method_in_file",
    "find_method_in_lines",
    "find_model_file",
    "find_model_load",
    "parse_model_loads",
    "path_exists",
    "resolve_project_root",
    "sort_app_dirs",
    "split_model_path",
]
