"""
================================================================================
OpenCart Admin Automation
================================================================================
Author      : Breno Farias da Silva
Created     : <2026-03-18>
Description :
    This script automates the admin panel of an OpenCart-based website. For
    every product job of the input file it logs in (once), opens the product
    page, fills its description, uploads its images through the OpenCart file
    manager into the requested directory, assigns the main and secondary
    images, and saves the product.

    Key features include:
        - Configuration through a .env file
        - One product job per line of the input file
        - Directory-aware uploads through the OpenCart file manager
        - Progress bar over the product jobs
        - Logging of the whole run to ./Logs/
        - Successful jobs removed from the input file (optional)

Usage:
    1. Configure the .env file:
            OPENCART_BASE_URL=https://shop.example
            OPENCART_USERNAME=admin
            OPENCART_PASSWORD=secret
            OPENCART_SUCCESS_MSG=Success: Your file has been uploaded!
    2. Describe the product jobs in ./Inputs/products.txt, one per line:
            product_id | directory | description_file | image1, image2, ...
    3. Run the script via Makefile or Python:
            $ make run   or   $ python main.py
    4. Verify the log in the ./Logs/ directory.

Outputs:
    - Updated product pages on the website
    - Logs in ./Logs/ for execution details

Dependencies:
    - Python >= 3.8
    - playwright for browser automation
    - beautifulsoup4 for the catalog parsing
    - colorama for terminal coloring
    - python-dotenv for environment variables
    - tqdm for the progress bar

Assumptions & Notes:
    - The admin account must be allowed to edit products and upload images
    - Admin page structures may change between OpenCart versions
    - Sound notifications are disabled on Windows
"""

import atexit  # For playing a sound when the program finishes
import datetime  # For getting the current date and time
import os  # For running a command in the terminal
import platform  # For getting the operating system name
import sys  # For system-specific parameters and functions
from admin_errors import OpenCartAdminError  # Base class of the automation errors
from colorama import Style  # For coloring the terminal
from dotenv import load_dotenv  # For loading environment variables
from Logger import Logger  # For logging output to both terminal and file
from OpenCartAdmin import OpenCartAdmin  # Import the OpenCartAdmin class
from pathlib import Path  # For handling file paths
from playwright.sync_api import Error as PlaywrightError  # Browser automation errors
from tqdm import tqdm  # Progress bar for product processing


# Macros:
class BackgroundColors:  # Colors for the terminal
    CYAN = "\033[96m"  # Cyan
    GREEN = "\033[92m"  # Green
    YELLOW = "\033[93m"  # Yellow
    RED = "\033[91m"  # Red
    BOLD = "\033[1m"  # Bold
    UNDERLINE = "\033[4m"  # Underline
    CLEAR_TERMINAL = "\033[H\033[J"  # Clear the terminal


# Execution Constants:
VERBOSE = False  # Set to True to output verbose messages

# File Path Constants:
INPUT_DIRECTORY = "./Inputs/"  # The path to the input directory
INPUT_FILE = f"{INPUT_DIRECTORY}products.txt"  # The path to the input file
INPUT_FIELD_SEPARATOR = "|"  # Separator between the fields of a product job line
IMAGE_SEPARATOR = ","  # Separator between the image paths of a product job line
CLEAR_INPUT_FILE = True  # When True, remove successfully processed product lines from the input file

# Environment Variables:
ENV_PATH = "./.env"  # The path to the .env file
ENV_VARIABLES = {
    "BASE URL": "OPENCART_BASE_URL",
    "USERNAME": "OPENCART_USERNAME",
    "PASSWORD": "OPENCART_PASSWORD",
    "SUCCESS MESSAGE": "OPENCART_SUCCESS_MSG",
}  # The environment variables to load from the .env file
DEFAULT_VERSION = "1.5"  # OpenCart version used when OPENCART_VERSION is not set

# Logger Constants:
LOG_FILE = f"./Logs/{Path(__file__).stem}.log"  # The path to the log file

# Sound Constants:
SOUND_COMMANDS = {
    "Darwin": "afplay",
    "Linux": "aplay",
    "Windows": "start",
}  # The commands to play a sound for each operating system
SOUND_FILE = "./.assets/Sounds/NotificationSound.wav"  # The path to the sound file

# RUN_FUNCTIONS:
RUN_FUNCTIONS = {
    "Play Sound": True,  # Set to True to play a sound when the program finishes
}

# Functions Definitions:


def verbose_output(true_string="", false_string=""):
    """
    Outputs a message if the VERBOSE constant is set to True.

    :param true_string: The string to be outputted if the VERBOSE constant is set to True.
    :param false_string: The string to be outputted if the VERBOSE constant is set to False.
    :return: None
    """

    if VERBOSE and true_string != "":  # If VERBOSE is True and a true_string was provided
        print(true_string)  # Output the true statement string
    elif false_string != "":  # If a false_string was provided
        print(false_string)  # Output the false statement string


def setup_logger():
    """
    Redirects stdout and stderr to a Logger writing to both the terminal and the log file.

    :return: The Logger instance
    """

    logger = Logger(LOG_FILE, clean=True)  # Create a Logger instance
    sys.stdout = logger  # Redirect stdout to the logger
    sys.stderr = logger  # Redirect stderr to the logger

    return logger


def verify_filepath_exists(filepath):
    """
    Verify if a file or folder exists at the specified path.

    :param filepath: Path to the file or folder
    :return: True if the file or folder exists, False otherwise
    """

    verbose_output(
        f"{BackgroundColors.GREEN}Verifying if the file or folder exists at the path: {BackgroundColors.CYAN}{filepath}{Style.RESET_ALL}"
    )  # Output the verbose message

    return os.path.exists(filepath)  # Return True if the file or folder exists, False otherwise


def create_directory(full_directory_name, relative_directory_name):
    """
    Creates a directory.

    :param full_directory_name: Name of the directory to be created.
    :param relative_directory_name: Relative name of the directory to be created that will be shown in the terminal.
    :return: None
    """

    verbose_output(
        true_string=f"{BackgroundColors.GREEN}Creating the {BackgroundColors.CYAN}{relative_directory_name}{BackgroundColors.GREEN} directory...{Style.RESET_ALL}"
    )

    if os.path.isdir(full_directory_name):  # Verify if the directory already exists
        return  # Return if the directory already exists
    try:  # Try to create the directory
        os.makedirs(full_directory_name)  # Create the directory
    except OSError:  # If the directory cannot be created
        print(
            f"{BackgroundColors.GREEN}The creation of the {BackgroundColors.CYAN}{relative_directory_name}{BackgroundColors.GREEN} directory failed.{Style.RESET_ALL}"
        )


def ensure_input_file_exists(input_file=INPUT_FILE):
    """
    Ensure the input file exists; create an empty one if missing.

    :param input_file: Path to the input file
    :return: True if the input file exists or was created successfully, False otherwise
    """

    if verify_filepath_exists(input_file):  # Nothing to create
        return True

    try:  # Attempt to create an empty input file
        open(input_file, "w", encoding="utf-8").close()  # Create an empty file at input_file
        verbose_output(
            f"{BackgroundColors.GREEN}Created empty input file: {BackgroundColors.CYAN}{input_file}{Style.RESET_ALL}"
        )  # Output the verbose message
        return True  # Return True when file was created successfully
    except OSError as e:  # If creating the file fails
        print(
            f"{BackgroundColors.RED}Failed to create input file {BackgroundColors.CYAN}{input_file}{BackgroundColors.RED}: {e}{Style.RESET_ALL}"
        )  # Output reason for failure
        return False  # Return False to indicate failure to ensure file


def verify_dot_env_file():
    """
    Verifies if the .env file exists in the current directory.

    :return: True if the .env file exists, False otherwise
    """

    verbose_output(
        f"{BackgroundColors.GREEN}Verifying if the {BackgroundColors.CYAN}.env{BackgroundColors.GREEN} file exists...{Style.RESET_ALL}"
    )  # Output the verbose message

    if not verify_filepath_exists(ENV_PATH):  # If the .env file does not exist
        print(f"{BackgroundColors.CYAN}.env{BackgroundColors.YELLOW} file not found at {BackgroundColors.CYAN}{ENV_PATH}{BackgroundColors.YELLOW}.{Style.RESET_ALL}")
        return False  # Return False

    return True  # Return True if the .env file exists


def verify_env_variables():
    """
    Verifies if the required environment variables are set in the .env file.

    :return: True if all required environment variables are set, False otherwise
    """

    missing_variables = []  # List to store missing environment variables

    for ref_name, env_var in ENV_VARIABLES.items():  # ENV_VARIABLES = {"REFERENCE_NAME": "ENV_VAR_NAME"}
        if os.getenv(env_var) is None:  # If the environment variable is not set
            missing_variables.append(f"{ref_name} ({env_var})")  # Add the missing variable to the list

    if missing_variables:  # If there are any missing variables
        print(
            f"{BackgroundColors.YELLOW}The following environment variables are missing from the .env file: "
            f"{BackgroundColors.CYAN}{', '.join(missing_variables)}{Style.RESET_ALL}"
        )
        return False  # Return False if any required environment variable is missing

    return True  # Return True if all required environment variables are set


def build_admin_config():
    """
    Builds the OpenCartAdmin configuration from the environment variables.

    :return: Tuple (config dictionary, OpenCart version)
    """

    config = {
        "base_url": os.getenv("OPENCART_BASE_URL", ""),
        "credentials": {
            "username": os.getenv("OPENCART_USERNAME", ""),
            "password": os.getenv("OPENCART_PASSWORD", ""),
        },
        "file_manager_options": {
            "success_msg": os.getenv("OPENCART_SUCCESS_MSG", ""),
        },
        "product_page_options": {
            "overwrite_description": os.getenv("OPENCART_OVERWRITE_DESCRIPTION", "False").lower() == "true",
            "overwrite_main_image": os.getenv("OPENCART_OVERWRITE_MAIN_IMAGE", "False").lower() == "true",
            "overwrite_secondary_images": os.getenv("OPENCART_OVERWRITE_SECONDARY_IMAGES", "False").lower() == "true",
        },
        "placeholder_image": os.getenv("OPENCART_PLACEHOLDER_IMAGE", ""),
    }  # Configuration assembled from the environment

    return config, os.getenv("OPENCART_VERSION", DEFAULT_VERSION)


def resolve_input_path(path):
    """
    Resolves a path of the input file. Relative paths are looked up in the input directory first.

    :param path: Path as written in the input file
    :return: The resolved path
    """

    if os.path.isabs(path) or verify_filepath_exists(path):  # Usable as is
        return path

    candidate = os.path.join(INPUT_DIRECTORY, path)  # Relative to the input directory
    return candidate if verify_filepath_exists(candidate) else path


def parse_product_line(line):
    """
    Parses a product job line: "product_id | directory | description_file | image1, image2, ...".

    Only the product ID is required. Blank lines and lines starting with "#" are ignored.

    :param line: Line of the input file
    :return: Dictionary with "id", "directory", "description_file" and "images", or None for ignored lines
    """

    stripped = line.strip()  # Trim whitespace
    if not stripped or stripped.startswith("#"):  # Blank line or comment
        return None

    fields = [field.strip() for field in stripped.split(INPUT_FIELD_SEPARATOR)]  # Split the fields
    fields += [""] * (4 - len(fields))  # Missing trailing fields are empty

    product_id, directory, description_file, images = fields[:4]  # Unpack the known fields

    return {
        "id": product_id,
        "directory": directory.strip("/") or None,  # Directory paths have no leading or trailing separator
        "description_file": description_file or None,
        "images": [image.strip() for image in images.split(IMAGE_SEPARATOR) if image.strip()],
    }


def load_products_to_process(input_file=INPUT_FILE):
    """
    Reads the product jobs of the input file.

    :param input_file: Path to the input file
    :return: List of product job dictionaries, in file order
    """

    products = []  # Parsed product jobs

    if not verify_filepath_exists(input_file):  # If the input file does not exist
        print(f"{BackgroundColors.YELLOW}Input file not found: {input_file}{Style.RESET_ALL}")
        return products

    try:  # Try to read the product jobs from the input file
        with open(input_file, "r", encoding="utf-8") as fh:  # Open the input file with UTF-8 encoding
            for line in fh:  # Read each line in the file
                product = parse_product_line(line)  # Parse the line
                if product:  # Skip ignored lines
                    products.append(product)
    except OSError as e:  # If an error occurs while reading the file
        print(f"{BackgroundColors.RED}Error reading input file {input_file}: {e}{Style.RESET_ALL}")

    return products


def read_description(description_file):
    """
    Reads a product description file.

    :param description_file: Path to the description file, or None
    :return: The description text, or "" when there is no file
    """

    if not description_file:  # No description for this product
        return ""

    path = resolve_input_path(description_file)  # Look in the input directory too
    if not verify_filepath_exists(path):  # Missing file
        print(f"{BackgroundColors.YELLOW}Description file not found: {BackgroundColors.CYAN}{description_file}{Style.RESET_ALL}")
        return ""

    with open(path, "r", encoding="utf-8") as f:  # Open the description file with UTF-8 encoding
        return f.read().strip()  # Read the product description


def remove_product_line_from_input_file(product_id, input_file=INPUT_FILE):
    """
    Removes the first line of the input file describing a product.

    :param product_id: Product ID of the line to remove
    :param input_file: Path to the input file
    :return: True if a line was removed, False otherwise
    """

    verbose_output(
        f"{BackgroundColors.GREEN}Removing product from input file: {BackgroundColors.CYAN}{product_id}{Style.RESET_ALL}"
    )  # Output the verbose message

    if not verify_filepath_exists(input_file):  # If the input file doesn't exist, nothing to remove
        return False

    with open(input_file, "r", encoding="utf-8") as f:  # Read current input file
        lines = f.readlines()  # Load all lines

    removed = False  # Track whether we removed a line
    new_lines = []  # Lines to keep
    for line in lines:  # Iterate existing lines
        product = parse_product_line(line)  # Parse the line
        if not removed and product and product["id"] == product_id:  # First matching job
            removed = True  # Mark removed and skip appending this line
            continue
        new_lines.append(line)  # Keep non-matching line

    if removed:  # If we removed a line, atomically rewrite the file
        tmp_path = input_file + ".tmp"  # Temporary file path for safe write
        with open(tmp_path, "w", encoding="utf-8") as f:  # Write new content to temp file
            f.writelines(new_lines)  # Write kept lines back
        os.replace(tmp_path, input_file)  # Replace original file with temp file

    return removed  # Return whether a line was removed


def process_product(admin, product):
    """
    Fills the product page of a product job.

    :param admin: Started OpenCartAdmin instance
    :param product: Product job dictionary
    :return: True if the product page was saved, False otherwise
    """

    description = read_description(product["description_file"])  # Text to write
    image_paths = [resolve_input_path(image) for image in product["images"]]  # Local images

    try:  # One failing product must not stop the run
        uploaded = admin.fill_product_page(product["id"], description, image_paths, product["directory"])
    except (OpenCartAdminError, PlaywrightError) as e:  # Automation or browser failure
        print(f"{BackgroundColors.RED}Failed to process product {BackgroundColors.CYAN}{product['id']}{BackgroundColors.RED}: {e}{Style.RESET_ALL}")
        return False

    if len(uploaded) < len(image_paths):  # Some uploads were not confirmed
        print(f"{BackgroundColors.YELLOW}Only {BackgroundColors.CYAN}{len(uploaded)}/{len(image_paths)}{BackgroundColors.YELLOW} images of {BackgroundColors.CYAN}{product['id']}{BackgroundColors.YELLOW} were uploaded.{Style.RESET_ALL}")

    return True


def to_seconds(obj):
    """
    Converts various time-like objects to seconds.

    :param obj: The object to convert (can be int, float, timedelta, datetime, etc.)
    :return: The equivalent time in seconds as a float, or None if conversion fails
    """

    if obj is None:  # None can't be converted
        return None  # Signal failure to convert
    if isinstance(obj, (int, float)):  # Already numeric (seconds or timestamp)
        return float(obj)  # Return as float seconds
    if hasattr(obj, "total_seconds"):  # Timedelta-like objects
        return float(obj.total_seconds())  # Use the total_seconds() method
    if hasattr(obj, "timestamp"):  # Datetime-like objects
        return float(obj.timestamp())  # Use timestamp() to get seconds since epoch
    return None  # Couldn't convert


def calculate_execution_time(start_time, finish_time=None):
    """
    Calculates the execution time and returns a human-readable string.

    Accepts either:
    - Two datetimes/timedeltas: `calculate_execution_time(start, finish)`
    - A single timedelta or numeric seconds: `calculate_execution_time(delta)`

    Returns a string like "1h 2m 3s".
    """

    if finish_time is None:  # Single-argument mode: start_time already represents duration or seconds
        total_seconds = to_seconds(start_time) or 0.0  # Convert provided value to seconds
    else:  # Two-argument mode: Compute difference finish_time - start_time
        st = to_seconds(start_time)  # Convert start to seconds if possible
        ft = to_seconds(finish_time)  # Convert finish to seconds if possible
        total_seconds = ft - st if st is not None and ft is not None else 0.0  # Direct numeric subtraction

    total_seconds = abs(total_seconds)  # Normalize negative durations

    days = int(total_seconds // 86400)  # Compute full days
    hours = int((total_seconds % 86400) // 3600)  # Compute remaining hours
    minutes = int((total_seconds % 3600) // 60)  # Compute remaining minutes
    seconds = int(total_seconds % 60)  # Compute remaining seconds

    if days > 0:  # Include days when present
        return f"{days}d {hours}h {minutes}m {seconds}s"  # Return formatted days+hours+minutes+seconds
    if hours > 0:  # Include hours when present
        return f"{hours}h {minutes}m {seconds}s"  # Return formatted hours+minutes+seconds
    if minutes > 0:  # Include minutes when present
        return f"{minutes}m {seconds}s"  # Return formatted minutes+seconds
    return f"{seconds}s"  # Fallback: only seconds


def play_sound():
    """
    Plays a sound when the program finishes and skips if the operating system is Windows.

    :param: None
    :return: None
    """

    current_os = platform.system()  # Get the current operating system
    if current_os == "Windows":  # If the current operating system is Windows
        return  # Do nothing

    if verify_filepath_exists(SOUND_FILE):  # If the sound file exists
        if current_os in SOUND_COMMANDS:  # If the platform.system() is in the SOUND_COMMANDS dictionary
            os.system(f"{SOUND_COMMANDS[current_os]} {SOUND_FILE}")  # Play the sound
        else:  # If the platform.system() is not in the SOUND_COMMANDS dictionary
            print(
                f"{BackgroundColors.RED}The {BackgroundColors.CYAN}{current_os}{BackgroundColors.RED} is not in the {BackgroundColors.CYAN}SOUND_COMMANDS dictionary{BackgroundColors.RED}. Please add it!{Style.RESET_ALL}"
            )
    else:  # If the sound file does not exist
        print(
            f"{BackgroundColors.RED}Sound file {BackgroundColors.CYAN}{SOUND_FILE}{BackgroundColors.RED} not found. Make sure the file exists.{Style.RESET_ALL}"
        )


def main():
    """
    Main function.

    :param: None
    :return: None
    """

    setup_logger()  # Log the whole run

    print(
        f"{BackgroundColors.CLEAR_TERMINAL}{BackgroundColors.BOLD}{BackgroundColors.GREEN}Welcome to the {BackgroundColors.CYAN}OpenCart Admin Automation{BackgroundColors.GREEN} program!{Style.RESET_ALL}",
        end="\n",
    )  # Output the welcome message
    start_time = datetime.datetime.now()  # Get the start time of the program

    if not verify_dot_env_file():  # Verify if the .env file exists
        print(f"{BackgroundColors.RED}Environment setup failed. Exiting...{Style.RESET_ALL}")
        return

    load_dotenv(ENV_PATH)  # Load environment variables

    if not verify_env_variables():  # Verify if the required environment variables are set
        print(f"{BackgroundColors.RED}Environment variables missing. Exiting...{Style.RESET_ALL}")
        return

    create_directory(
        os.path.abspath(INPUT_DIRECTORY), INPUT_DIRECTORY.replace(".", "")
    )  # Create the input directory

    if not ensure_input_file_exists():  # Ensure the input file exists
        return  # Exit if unable to ensure input file

    products = load_products_to_process()  # Product jobs of the input file
    total_products = len(products)  # Total number of product jobs
    successful_products = 0  # Counter for successful operations

    if total_products == 0:  # Nothing to do
        print(f"{BackgroundColors.YELLOW}No products to process.{Style.RESET_ALL}")
    else:  # Log in once and process every product job
        config, version = build_admin_config()  # Website configuration
        admin = OpenCartAdmin(config, version)  # Automation for this website

        try:  # The browser is closed whatever happens
            admin.start()  # Launch the browser and log in

            pbar = tqdm(
                products,
                desc=f"{BackgroundColors.GREEN}Processing products{Style.RESET_ALL}",
                unit="product",
                ncols=100,
                bar_format="{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}, {rate_fmt}]",
                file=sys.__stdout__,
            )
            for index, product in enumerate(pbar, 1):  # Iterate through all product jobs
                pbar.set_description(
                    f"{BackgroundColors.GREEN}Processing {BackgroundColors.CYAN}{index}{BackgroundColors.GREEN}/{BackgroundColors.CYAN}{total_products}{BackgroundColors.GREEN} - {BackgroundColors.CYAN}{product['id']}{Style.RESET_ALL}"
                )  # Update the progress bar description

                if process_product(admin, product):  # Product saved
                    successful_products += 1  # Increment successful products counter
                    if CLEAR_INPUT_FILE:  # Only clear input lines when configured
                        removed = remove_product_line_from_input_file(product["id"])  # Drop the finished job
                        verbose_output(f"{BackgroundColors.GREEN}Removed input line: {BackgroundColors.CYAN}{product['id']}{BackgroundColors.GREEN} -> {removed}{Style.RESET_ALL}")
        except (OpenCartAdminError, PlaywrightError) as e:  # Login or launch failure
            print(f"{BackgroundColors.RED}Automation stopped: {e}{Style.RESET_ALL}")
        finally:
            admin.close()  # Close the browser

    print(f"{BackgroundColors.GREEN}Successfully processed: {BackgroundColors.CYAN}{successful_products}/{total_products}{BackgroundColors.GREEN} products{Style.RESET_ALL}\n")  # Output the number of successful operations

    finish_time = datetime.datetime.now()  # Get the finish time of the program
    print(
        f"{BackgroundColors.GREEN}Execution time: {BackgroundColors.CYAN}{calculate_execution_time(start_time, finish_time)}{Style.RESET_ALL}"
    )  # Output the start and finish times
    print(
        f"{BackgroundColors.BOLD}{BackgroundColors.GREEN}Program finished.{Style.RESET_ALL}"
    )  # Output the end of the program message

    (
        atexit.register(play_sound) if RUN_FUNCTIONS["Play Sound"] else None
    )  # Register the play_sound function to be called when the program finishes


if __name__ == "__main__":
    """
    This is the standard boilerplate that calls the main() function.

    :return: None
    """

    main()  # Call the main function
