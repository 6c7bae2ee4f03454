import pytest

# 6-311G basis set for C, as downloaded from the Basis Set Exchange
CARBON_6_311G = """

!----------------------------------------------------------------------
! Basis Set Exchange
! Version v0.9
! https://www.basissetexchange.org
!----------------------------------------------------------------------
!   Basis set: 6-311G
! Description: VTZ Valence Triple Zeta: 3 Funct.'s/Valence AO
!        Role: orbital
!     Version: 0  (Data from the Original Basis Set Exchange)
!----------------------------------------------------------------------


C     0
S    6   1.00
   4563.240                  0.00196665
    682.0240                 0.0152306
    154.9730                 0.0761269
     44.45530                0.2608010
     13.02900                0.6164620
      1.827730               0.2210060
SP   3   1.00
     20.96420                0.114660               0.0402487
      4.803310               0.919999               0.237594
      1.459330              -0.00303068             0.815854
SP   1   1.00
      0.4834560              1.000000               1.000000
SP   1   1.00
      0.1455850              1.000000               1.000000
****
"""

# STO-3G for H and O in one file, with Fortran exponents in the O block
STO_3G_H_O = """! STO-3G
****
H     0
S    3   1.00
      3.42525091             0.15432897
      0.62391373             0.53532814
      0.16885540             0.44463454
****
O     0
S    3   1.00
      0.1307093214D+03       0.1543289673D+00
      0.2380886605D+02       0.5353281423D+00
      0.6443608313D+01       0.4446345422D+00
SP   3   1.00
      0.5033151319D+01      -0.9996722919D-01       0.1559162750D+00
      0.1169596125D+01       0.3995128261D+00       0.6076837186D+00
      0.3803889600D+00       0.7001154689D+00       0.3919573931D+00
****

"""


@pytest.fixture
def carbon_lines() -> list[str]:
    """The carbon block as lines with trailing newlines, like a text file yields them."""
    return CARBON_6_311G.splitlines(keepends=True)


@pytest.fixture
def sto3g_lines() -> list[str]:
    return STO_3G_H_O.splitlines()
