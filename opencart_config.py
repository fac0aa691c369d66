"""
opencart_config.py — Per-version OpenCart admin configuration

Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    Single source-of-truth for the admin paths and CSS selectors of every
    supported OpenCart version, plus the default options of the automation.
    `OpenCartAdmin` merges, in order: DEFAULT_CONFIG, the user config, and
    VERSION_CONFIG[version].

    The main exports are:
        - DEFAULT_CONFIG: default product page options and placeholder image
        - VERSION_CONFIG: paths and selectors keyed by OpenCart version
        - deep_merge: recursive dictionary merge used to combine them

Usage:
    from opencart_config import DEFAULT_CONFIG, VERSION_CONFIG, deep_merge
    config = deep_merge(deep_merge(DEFAULT_CONFIG, user_config), VERSION_CONFIG["1.5"])
"""


import copy  # Deep copies of the configuration tables


# Default Options:
DEFAULT_CONFIG = {
    "product_page_options": {
        "overwrite_description": False,  # Overwrite an existing description
        "auto_delete_description": False,  # Delete the description when no new one is given
        "overwrite_main_image": False,  # Overwrite an existing main image
        "auto_delete_main_image": False,  # Delete the main image when no new one is given
        "overwrite_secondary_images": False,  # Overwrite existing secondary images
        "auto_delete_secondary_images": False,  # Delete secondary images when no new ones are given
    },
    "placeholder_image": "",  # URL of the image shown in empty product image slots
    "block_assets": True,  # Abort image and stylesheet requests
}  # Options used when the user config omits them

# Version Tables:
VERSION_CONFIG = {
    "1.5": {
        "paths": {
            "dashboard": "index.php?route=common/home",  # Landing page after login
            "catalog": "index.php?route=catalog/product",  # Product list
            "product": "index.php?route=catalog/product/update",  # Product edit form
        },  # Admin pages, relative to <base>/admin/
        "file_manager_files_route": "route=common/filemanager/files",  # URL fragment of file listing requests
        "login_selectors": {
            "username": "input[name='username']",  # Username field
            "password": "input[name='password']",  # Password field
            "btn": "#content .content a.button",  # Login button
        },
        "catalog_selectors": {
            "input_model": "input[name='filter_model']",  # Model filter field
            "table_rows": "table.list tbody tr",  # Rows of the product list
            "model_cell": "td:nth-of-type(4)",  # Cell holding the product model (ID)
            "link_cell": "td.right",  # Cell holding the edit link
        },
        "product_page_selectors": {
            "tabs": {
                "general": "#tabs a[href='#tab-general']",  # General tab
                "data": "#tabs a[href='#tab-data']",  # Data tab
                "image": "#tabs a[href='#tab-image']",  # Image tab
            },
            "general": {
                "editor": "#cke_description1 iframe",  # Rich text editor iframe
                "editor_text_area": "body",  # Editable body of the editor
            },
            "data": {
                "image": "#thumb",  # Main image thumbnail
                "upload_btn": "#tab-data a[onclick^=\"image_upload('image'\"]",  # Opens the file manager for the main image
                "delete_btn": "#tab-data a[onclick*=\"$('#thumb').attr('src'\"]",  # Clears the main image
            },
            "image": {
                "images": "#images tbody img",  # Secondary image thumbnails
                "upload_btns": "#images tbody a[onclick^=\"image_upload(\"]",  # Open the file manager for a slot
                "add_btn": "#images tfoot a.button",  # Adds a secondary image slot
                "delete_btns": "#images tbody a.button",  # Remove a secondary image slot
            },
            "save_btn": "#content .buttons a.button:first-child",  # Saves the product
        },
        "file_manager_selectors": {
            "frame": "#dialog iframe",  # File manager iframe
            "close_btn": ".ui-dialog-titlebar-close",  # Closes the file manager dialog
            "upload_btn": "#upload",  # Upload button inside the file manager
            "list": "#column-right a",  # File entries of the listing column
        },
    },
}  # Paths and selectors for every supported OpenCart version


# Functions Definitions:


def deep_merge(base, override):
    """
    Recursively merge two dictionaries into a new one. Values of override win.

    :param base: Base dictionary (left untouched)
    :param override: Dictionary whose values take precedence (left untouched)
    :return: The merged dictionary
    """

    merged = copy.deepcopy(base)  # Never mutate the tables

    for key, value in (override or {}).items():  # Walk the overrides
        if isinstance(value, dict) and isinstance(merged.get(key), dict):  # Merge nested tables
            merged[key] = deep_merge(merged[key], value)
        else:  # Plain values replace
            merged[key] = copy.deepcopy(value)

    return merged
