from setuptools import find_packages, setup

# Minimal setup.py to allow pip installation in environments (like p4a) that
# default to legacy builds and need explicit python_requires plus py_modules
# for the top-level entrypoint file.

package_list = find_packages(
  include=[
    "full_screen_helper",
    "full_screen_helper.*",
    "os_interfaces",
    "os_interfaces.*",
    "entrypoints",
    "entrypoints.*",
  ]
)

setup(
  name="full-screen-helper",
  version="0.1.0",
  description="Full-screen intent permission and lock-screen wake-up helper for Android apps",
  python_requires=">=3.11",
  packages=package_list,
  py_modules=["main"],
  include_package_data=True,
  install_requires=[
    "pydantic",
    "python-dotenv",
  ],
  extras_require={
    "android": ["pyjnius", "cython==3.0.12", "buildozer"],
    "dev": ["pytest", "pytest-cov"],
  },
)
