# contrasthero - A maubot to play the Contrast Hero accessibility game in Matrix.
# Copyright (C) 2020 Tulir Asokan
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
from contrast import RGB, WebColor

# iOS system colors (light appearance)
SYSTEM_BLUE = RGB.from_rgb8(0, 122, 255)
SYSTEM_GRAY = RGB.from_rgb8(142, 142, 147)
SYSTEM_GRAY2 = RGB.from_rgb8(174, 174, 178)
SYSTEM_GRAY6 = RGB.from_rgb8(242, 242, 247)
SYSTEM_ORANGE = RGB.from_rgb8(255, 149, 0)
SYSTEM_PINK = RGB.from_rgb8(255, 45, 85)
SYSTEM_PURPLE = RGB.from_rgb8(175, 82, 222)
SYSTEM_RED = RGB.from_rgb8(255, 59, 48)
SYSTEM_YELLOW = RGB.from_rgb8(255, 204, 0)

BLACK = RGB(0, 0, 0)
WHITE = RGB(1, 1, 1)
BLUE = WebColor("blue").rgb
