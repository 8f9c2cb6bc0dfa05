import pytest

from fgusheet.tree import parse_document

SAMPLE_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<root version="4.4" dataversion="20230911" release="8.1|CoreRPG:6">
    <character>
        <name type="string">Aria Moonwhisper</name>
        <race type="string">Elf</race>
        <subrace type="string">High Elf</subrace>
        <alignment type="string">Chaotic Good</alignment>
        <background type="string">Sage</background>
        <gender type="string">Female</gender>
        <personality type="string">Curious about everything.</personality>
        <flaws type="string">Overlooks the obvious.</flaws>
        <classes>
            <id-00001>
                <name type="string">Wizard</name>
                <level type="number">3</level>
                <specialization type="string">School of Evocation</specialization>
            </id-00001>
            <id-00002>
                <name type="string">Fighter</name>
                <level type="number">2</level>
            </id-00002>
        </classes>
        <abilities>
            <strength>
                <score type="number">10</score>
                <bonus type="number">0</bonus>
                <save type="number">0</save>
            </strength>
            <dexterity>
                <score type="number">14</score>
                <bonus type="number">2</bonus>
                <save type="number">2</save>
            </dexterity>
            <intelligence>
                <score type="number">18</score>
                <bonus type="number">4</bonus>
                <save type="number">7</save>
                <saveprof type="number">1</saveprof>
            </intelligence>
        </abilities>
        <hp>
            <total type="number">28</total>
            <wounds type="number">5</wounds>
        </hp>
        <defenses>
            <ac>
                <total type="number">13</total>
            </ac>
        </defenses>
        <speed>
            <total type="number">35</total>
        </speed>
        <skilllist>
            <id-00001>
                <name type="string">Stealth</name>
                <total type="number">2</total>
                <stat type="string">dexterity</stat>
            </id-00001>
            <id-00002>
                <name type="string">Arcana</name>
                <total type="number">7</total>
                <prof type="number">1</prof>
                <stat type="string">intelligence</stat>
            </id-00002>
        </skilllist>
        <featurelist>
            <id-00001>
                <name type="string">Arcane Recovery</name>
                <level type="number">1</level>
                <text type="formattedtext">
                    <p>You can regain some magical energy.</p>
                    <p></p>
                    <p>Once per day after a short rest.</p>
                </text>
            </id-00001>
            <id-00002>
                <name type="string">Second Wind</name>
                <level type="number">1</level>
            </id-00002>
        </featurelist>
        <featlist>
            <id-00001>
                <name type="string">War Caster</name>
                <category type="string">General</category>
                <text type="formattedtext">
                    <p>Advantage on concentration saves.</p>
                </text>
            </id-00001>
        </featlist>
        <inventorylist>
            <id-00001>
                <name type="string">Acid (vial)</name>
                <count type="number">2</count>
                <cost type="string">25 gp</cost>
                <description type="formattedtext">
                    <p><b>Splash. </b>As an action, you can splash the contents.</p>
                    <p>Range 20 feet.</p>
                </description>
            </id-00001>
            <id-00002>
                <name type="string">Spellbook</name>
            </id-00002>
        </inventorylist>
        <coins>
            <id-00001>
                <name type="string">GP</name>
                <amount type="number">75</amount>
            </id-00001>
            <id-00002>
                <name type="string">SP</name>
                <amount type="number">12</amount>
            </id-00002>
        </coins>
        <powermeta>
            <spellslots1>
                <max type="number">4</max>
                <used type="number">1</used>
            </spellslots1>
            <spellslots2>
                <max type="number">2</max>
                <used type="number">0</used>
            </spellslots2>
            <spellslots3>
                <max type="number">0</max>
            </spellslots3>
        </powermeta>
        <powers>
            <id-00001>
                <name type="string">Magic Missile</name>
                <group type="string">Spells</group>
                <level type="number">1</level>
                <prepared type="number">1</prepared>
                <school type="string">Evocation</school>
                <castingtime type="string">1 action</castingtime>
                <range type="string">120 feet</range>
                <description type="formattedtext">
                    <p>You create three glowing darts of magical force.</p>
                </description>
            </id-00001>
            <id-00002>
                <name type="string">Fire Bolt</name>
                <group type="string">Spells</group>
                <level type="number">0</level>
                <school type="string">Evocation</school>
            </id-00002>
            <id-00003>
                <name type="string">Detect Magic</name>
                <group type="string">Spells (Wizard)</group>
                <level type="number">1</level>
                <ritual type="number">1</ritual>
            </id-00003>
            <id-00004>
                <name type="string">Second Wind</name>
                <group type="string">Class Features</group>
                <prepared type="number">1</prepared>
            </id-00004>
        </powers>
    </character>
</root>
"""


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def sample_tree():
    return parse_document(SAMPLE_XML)


@pytest.fixture
def sample_char(sample_tree):
    return sample_tree["root"]["character"][0]
