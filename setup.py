# pybaro - Python software for BMP280 barometric pressure sensors
# Copyright (C) 2025  pybaro contributors

# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.

from datetime import date
from setuptools import setup

# read current version info without importing pybaro package
with open('src/pybaro/__init__.py') as f:
    exec(f.read())

# get GitHub repo information
# requires GitPython - 'pip install --user gitpython'
try:
    import git
except ImportError:
    git = None
if git:
    try:
        repo = git.Repo()
        if repo.is_dirty():
            last_commit = str(repo.head.commit)[:7]
            # regenerate version info, if required
            if last_commit != _commit:
                _release = str(int(_release) + 1)
                _commit = last_commit
                today = date.today()
                __version__ = '{:d}.{:d}.{:d}'.format(
                    today.year % 100, today.month, 0)
            new_init_str = "__version__ = '" + __version__ + "'\n"
            new_init_str += "_release = '" + _release + "'\n"
            new_init_str += "_commit = '" + _commit + "'\n"
            with open('src/pybaro/__init__.py', 'r') as vf:
                old_init_str = vf.read()
            if new_init_str != old_init_str:
                with open('src/pybaro/__init__.py', 'w') as vf:
                    vf.write(new_init_str)
    except (git.exc.InvalidGitRepositoryError, git.exc.GitCommandNotFound,
            ValueError):
        pass

command_options = {}

# set options for building distributions
command_options['sdist'] = {
    'formats'        : ('setup.py', 'gztar'),
    }

setup(command_options=command_options)
