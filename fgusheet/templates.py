"""Jinja2 sources for the generated character sheet and the upload page."""

SHEET_CSS = """
        * { margin: 0; padding: 0; box-sizing: border-box; }
        html { font-size: 16px; }
        body {
            font-family: 'Book Antiqua', 'Palatino Linotype', Palatino, serif;
            background: linear-gradient(135deg, #f5f1e8 0%, #e8ddd4 100%);
            padding: 20px; color: #2c1810; line-height: 1.4;
            min-width: 280px; word-wrap: break-word; overflow-x: hidden;
        }
        .character-sheet {
            max-width: 1200px; width: 100%; margin: 0 auto; padding: 25px;
            background: white; border: 3px solid #8b6914; border-radius: 8px;
            box-shadow: 0 4px 20px rgba(0,0,0,0.2);
        }
        .header { border-bottom: 3px solid #8b6914; padding-bottom: 15px; margin-bottom: 20px; }
        .header h1 {
            font-size: 2.5em; color: #8b6914; text-align: center;
            margin-bottom: 10px; text-shadow: 2px 2px 4px rgba(0,0,0,0.1);
        }
        .header-info {
            display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
            gap: 10px; font-size: 1.1em;
        }
        .header-info div { background: #f5f1e8; padding: 8px 12px; border-radius: 4px; border-left: 4px solid #8b6914; }
        .header-info strong { color: #8b6914; margin-right: 5px; }
        .page {
            background: white; border: 3px solid #8b6914; border-radius: 24px;
            padding: 30px 20px; margin: 30px auto; max-width: 900px; width: 100%;
            box-shadow: 0 4px 20px rgba(0,0,0,0.1);
        }
        .page-layout { display: grid; grid-template-columns: 250px 1fr; gap: 20px; margin-bottom: 20px; }
        .sidebar { display: flex; flex-direction: column; gap: 5px; width: 100%; min-width: 0; }
        .main-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 15px; }
        .stat-box {
            background: #f5f1e8; border: 1px solid #8b6914; border-radius: 3px;
            padding: 3px; text-align: center; margin-bottom: 4px; min-width: 0;
        }
        .stat-box h3 { color: #8b6914; font-size: 0.7em; margin-bottom: 2px; text-transform: uppercase; letter-spacing: 0.3px; }
        .ability-score { font-size: 1.2em; font-weight: bold; margin: 2px 0; }
        .ability-modifier { font-size: 0.95em; color: #8b6914; font-weight: bold; margin: 2px 0; }
        .save-box { font-size: 0.85em; margin-top: 5px; }
        .skills { text-align: left; font-size: 0.85em; }
        .skill-item { display: flex; justify-content: space-between; padding: 4px 0; border-bottom: 1px dotted #ccc; }
        .section { background: #f5f1e8; border: 2px solid #8b6914; border-radius: 6px; padding: 15px; margin-bottom: 15px; }
        .section h2 {
            color: #8b6914; font-size: 1.3em; margin-bottom: 12px; padding-bottom: 8px;
            border-bottom: 2px solid #8b6914; text-transform: uppercase; letter-spacing: 1px;
        }
        .hp-box { text-align: center; padding: 15px; background: white; border-radius: 4px; margin-bottom: 10px; }
        .hp-box .hp-total { font-size: 2em; font-weight: bold; color: #c12727; }
        .hp-box .hp-current { font-size: 1.5em; }
        .hp-details { display: flex; justify-content: space-around; margin-top: 10px; font-size: 0.9em; }
        .hp-details div { display: flex; align-items: center; gap: 10px; }
        .hp-details input { width: 60px; padding: 4px; border: 1px solid #8b6914; text-align: center; }
        .combat-stats { text-align: center; padding: 15px; }
        .combat-stats > div { margin-bottom: 15px; }
        .big-stat { font-size: 1.5em; font-weight: bold; color: #8b6914; }
        .features-list, .feats-list, .inventory-list { list-style: none; }
        .features-list li, .feats-list li, .inventory-list li { padding: 6px 0; border-bottom: 1px dotted #ccc; }
        .spell-slot-level { display: flex; align-items: center; gap: 6px; margin-bottom: 6px; }
        .spell-slot-level strong { min-width: 70px; font-size: 0.9em; color: #8b6914; }
        .spell-slot-bubbles { display: flex; gap: 4px; flex-wrap: wrap; }
        .coins { display: flex; gap: 15px; justify-content: center; flex-wrap: wrap; padding: 10px; }
        .coin-item { text-align: center; padding: 8px 15px; background: white; border-radius: 4px; border: 1px solid #8b6914; }
        .coin-item input[type="text"] {
            width: 80px; padding: 6px; margin-top: 8px; border: 1px solid #8b6914; border-radius: 3px;
            text-align: center; font-size: 1.1em; font-weight: bold; color: #8b6914;
        }
        .spells-header { display: flex; justify-content: space-between; align-items: center; margin-bottom: 15px; }
        .spells-header h2 { margin: 0; }
        .spells-header button {
            background: #8b6914; color: white; border: none; padding: 6px 12px;
            border-radius: 3px; cursor: pointer; font-size: 0.85em;
        }
        .spell-level-toggle {
            background: white; border: 2px solid #8b6914; border-radius: 4px; padding: 12px;
            margin-bottom: 10px; cursor: pointer; display: flex; justify-content: space-between;
            align-items: center; user-select: none; transition: background-color 0.2s;
        }
        .spell-level-toggle:hover { background-color: #f5f1e8; }
        .spell-level-toggle h3 { color: #8b6914; font-size: 1.1em; margin: 0; }
        .spell-level-content { display: none; }
        .spell-level-content.active { display: block; }
        .spell { background: #f5f1e8; padding: 8px; border-radius: 3px; border-left: 3px solid #8b6914; margin-bottom: 8px; }
        .spell-meta { font-size: 0.85em; }
        .spell-description { font-size: 0.9em; color: #333; margin-top: 6px; padding-top: 6px; border-top: 1px dotted #ccc; }
        .spell-description p { margin: 5px 0; }
        .tooltip-trigger { position: relative; cursor: help; border-bottom: 1px dotted #8b6914; }
        .tooltip {
            display: none; position: absolute; left: 0; top: 100%; z-index: 1000;
            background: white; border: 2px solid #8b6914; border-radius: 6px; padding: 12px; margin-top: 5px;
            box-shadow: 0 4px 12px rgba(0, 0, 0, 0.3); max-width: 400px; min-width: 300px;
            font-size: 0.9em; line-height: 1.4; white-space: normal;
        }
        .tooltip-trigger:hover .tooltip { display: block; }
        .tooltip-title { font-weight: bold; color: #8b6914; margin-bottom: 8px; padding-bottom: 6px; border-bottom: 1px solid #8b6914; }
        .tooltip-content p { margin: 6px 0; }
        .personality p { margin: 6px 0; }
        @media (max-width: 900px) {
            body { padding: 4px; }
            .character-sheet { padding: 6px; border-width: 2px; }
            .header h1 { font-size: 1.4em; margin-bottom: 6px; }
            .header-info { grid-template-columns: 1fr; gap: 4px; font-size: 0.9em; }
            .page-layout, .main-grid { grid-template-columns: 1fr; gap: 10px; }
            .sidebar { flex-direction: row; flex-wrap: wrap; gap: 8px; }
            .stat-box { flex: 1; min-width: 90px; padding: 4px; margin-bottom: 0; }
            .section { padding: 8px; }
            .section h2 { font-size: 0.95em; margin-bottom: 6px; }
            .page { border-width: 2px; padding: 10px; margin: 12px 0; border-radius: 8px; }
        }
        @media (max-width: 600px) {
            html { font-size: 12px; }
            .page { border-width: 1px; padding: 6px; margin: 8px 0; border-radius: 4px; }
            .spell-level-toggle { flex-direction: column; gap: 6px; padding: 8px; }
            .hp-details { flex-direction: column; gap: 6px; }
            .coin-item input[type="text"] { width: 60px; padding: 3px; font-size: 0.85em; }
        }
"""

SHEET_SCRIPT = """
        function toggleSpell(elem) {
            const content = elem.nextElementSibling;
            content.classList.toggle('active');
        }

        function expandAllSpells() {
            document.querySelectorAll('.spell-level-content').forEach(el => el.classList.add('active'));
        }

        function collapseAllSpells() {
            document.querySelectorAll('.spell-level-content').forEach(el => el.classList.remove('active'));
        }
"""

SHEET_TEMPLATE = """<!DOCTYPE html>
{%- macro tooltip(title, paragraphs) -%}
<span class="tooltip">
    <div class="tooltip-title">{{ title }}</div>
    <div class="tooltip-content">{% for p in paragraphs %}<p>{{ p }}</p>{% endfor %}</div>
</span>
{%- endmacro -%}
{%- macro bubbles(tracker) -%}
{% for spent in tracker.bubbles %}<input type="checkbox"{% if spent %} checked{% endif %}>
{% endfor %}
{%- endmacro %}
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Character Sheet - {{ c.name or 'Unknown' }}</title>
    <style>{{ css }}</style>
</head>
<body>
    <div class="character-sheet">
        <div class="header">
            <h1>{{ c.name or 'Character Name' }}</h1>
            <div class="header-info">
                {%- if c.race %}
                <div><strong>Race:</strong> {{ c.race_display }}</div>
                {%- endif %}
                {%- if c.classes %}
                <div><strong>Class &amp; Level:</strong> {{ c.classes_display }}</div>
                {%- endif %}
                {%- if c.background %}
                <div><strong>Background:</strong> {{ c.background }}</div>
                {%- endif %}
                {%- if c.alignment %}
                <div><strong>Alignment:</strong> {{ c.alignment }}</div>
                {%- endif %}
                {%- if c.gender %}
                <div><strong>Gender:</strong> {{ c.gender }}</div>
                {%- endif %}
                {%- if c.age %}
                <div><strong>Age:</strong> {{ c.age }}</div>
                {%- endif %}
                <div><strong>Proficiency Bonus:</strong> {{ c.proficiency_bonus|modifier }}</div>
            </div>
        </div>

        <div class="page">
            <div class="page-layout">
                <div class="sidebar">
                    {%- for abil_name, abil in abilities %}
                    <div class="stat-box">
                        <h3>{{ abil_name[:3]|upper }}</h3>
                        <div class="ability-score">{{ abil.score }}</div>
                        <div class="ability-modifier">{{ abil.bonus|modifier }}</div>
                        <div class="save-box">SAVE {{ abil.save|modifier }} {% if abil.save_proficient %}&#10003;{% endif %}</div>
                    </div>
                    {%- endfor %}
                    <div class="stat-box">
                        <h3>Skills</h3>
                        <div class="skills">
                            {%- for skill in c.skills %}
                            <div class="skill-item">
                                <span>{% if skill.proficient %}&#9679;{% else %}&#9675;{% endif %} {{ skill.name }}</span>
                                <span>{{ skill.total|modifier }}</span>
                            </div>
                            {%- endfor %}
                        </div>
                    </div>
                </div>

                <div class="main-grid">
                    <div class="section">
                        <h2>Hit Points</h2>
                        <div class="hp-box">
                            <div class="hp-total">{{ c.hp_total }}</div>
                            <div class="hp-current">Current HP</div>
                            <div class="hp-details">
                                <div><span>Wounds:</span> <input type="text" value="{{ c.hp_wounds }}"></div>
                                <div><span>Temp:</span> <input type="text" value="{{ c.hp_temp }}"></div>
                            </div>
                        </div>
                    </div>

                    <div class="section">
                        <h2>Combat Stats</h2>
                        <div class="combat-stats">
                            <div><strong>Armor Class:</strong><div class="big-stat">{{ c.armor_class }}</div></div>
                            <div><strong>Initiative:</strong><div class="big-stat">{{ c.initiative|modifier }}</div></div>
                            <div><strong>Speed:</strong><div class="big-stat">{{ c.speed }} ft</div></div>
                            <div><strong>Proficiency Bonus:</strong><div class="big-stat">{{ c.proficiency_bonus|modifier }}</div></div>
                            <div><strong>Melee Attack Bonus:</strong><div class="big-stat">{{ c.melee_attack_bonus|modifier }}</div></div>
                        </div>
                    </div>

                    <div class="section">
                        <h2>Features</h2>
                        <ul class="features-list">
                            {%- for feature in c.features %}
                            {%- if feature.paragraphs %}
                            <li><span class="tooltip-trigger"><strong>{{ feature.name }}</strong> (Lvl {{ feature.level }})
                                {{ tooltip(feature.name, feature.paragraphs) }}</span></li>
                            {%- else %}
                            <li><strong>{{ feature.name }}</strong> (Lvl {{ feature.level }})</li>
                            {%- endif %}
                            {%- else %}
                            <li><em>No features</em></li>
                            {%- endfor %}
                        </ul>
                    </div>

                    <div class="section">
                        <h2>Feats</h2>
                        <ul class="feats-list">
                            {%- for feat in c.feats %}
                            {%- if feat.paragraphs %}
                            <li><span class="tooltip-trigger"><strong>{{ feat.name }}</strong>
                                {{ tooltip(feat.name, feat.paragraphs) }}</span></li>
                            {%- else %}
                            <li><strong>{{ feat.name }}</strong></li>
                            {%- endif %}
                            {%- else %}
                            <li><em>No feats</em></li>
                            {%- endfor %}
                        </ul>
                    </div>
                </div>
            </div>
        </div>

        <div class="page">
            {%- if c.has_personality %}
            <div class="section personality">
                <h2>Personality</h2>
                {%- if c.personality %}<p><strong>Traits:</strong> {{ c.personality }}</p>{% endif %}
                {%- if c.ideals %}<p><strong>Ideals:</strong> {{ c.ideals }}</p>{% endif %}
                {%- if c.bonds %}<p><strong>Bonds:</strong> {{ c.bonds }}</p>{% endif %}
                {%- if c.flaws %}<p><strong>Flaws:</strong> {{ c.flaws }}</p>{% endif %}
            </div>
            {%- endif %}

            <div class="section">
                <h2>Equipment</h2>
                <ul class="inventory-list">
                    {%- for item in c.inventory %}
                    {%- set label = item.name ~ (' x' ~ item.count if item.count != '1' else '') %}
                    {%- if item.paragraphs %}
                    <li><span class="tooltip-trigger"><span>{{ label }}</span>
                        {{ tooltip(item.name, item.paragraphs) }}</span></li>
                    {%- else %}
                    <li><span>{{ label }}</span></li>
                    {%- endif %}
                    {%- else %}
                    <li><em>No equipment</em></li>
                    {%- endfor %}
                </ul>
            </div>

            <div class="section">
                <h2>Wealth</h2>
                <div class="coins">
                    {%- for code in coin_order %}
                    <div class="coin-item">
                        <strong>{{ code }}</strong>
                        <input type="text" value="{{ c.coins.get(code, '0') }}" />
                    </div>
                    {%- endfor %}
                </div>
            </div>
        </div>

        <div class="page">
            {%- if c.spell_slots %}
            <div class="section spell-slots">
                <h2>Spell Slots</h2>
                {%- for level, slot in c.spell_slots|dictsort %}
                <div class="spell-slot-level">
                    <strong>Level {{ level }}:</strong>
                    <div class="spell-slot-bubbles">
                        {{ bubbles(slot) }}
                    </div>
                </div>
                {%- endfor %}
            </div>
            {%- endif %}

            {%- if c.sorcery_points %}
            <div class="section sorcery-points">
                <h2>Sorcery Points</h2>
                <div class="spell-slot-bubbles">
                    {{ bubbles(c.sorcery_points) }}
                </div>
            </div>
            {%- endif %}

            {%- if c.spells %}
            <div class="section spellcasting">
                <h2>Spellcasting</h2>
                <div class="main-grid combat-stats">
                    {%- if c.spellcasting_ability %}
                    <div><strong>Spellcasting Ability:</strong><div class="big-stat">{{ c.spellcasting_ability|capitalize }}</div></div>
                    {%- endif %}
                    <div><strong>Spell Save DC:</strong><div class="big-stat">{{ c.spell_save_dc }}</div></div>
                    <div><strong>Spell Attack Bonus:</strong><div class="big-stat">{{ c.spell_attack_bonus|modifier }}</div></div>
                </div>
            </div>

            <div class="section spells">
                <div class="spells-header">
                    <h2>Spells</h2>
                    <div>
                        <button onclick="expandAllSpells()">Expand All</button>
                        <button onclick="collapseAllSpells()">Collapse All</button>
                    </div>
                </div>
                {%- for label, level_spells in c.spells_by_level() %}
                <div class="spell-level-toggle" onclick="toggleSpell(this)">
                    <h3>{% if label == 'Cantrip' %}Cantrips{% else %}Level {{ label }}{% endif %} ({{ level_spells|length }} spells)</h3>
                    <span>&#9660;</span>
                </div>
                <div class="spell-level-content">
                    {%- for spell in level_spells %}
                    <div class="spell">
                        <div><strong>{% if spell.is_prepared %}&#9679;{% else %}&#9675;{% endif %} {{ spell.name }}</strong>{% if spell.ritual %} <em>(ritual)</em>{% endif %}</div>
                        {%- if spell.school %}
                        <div class="spell-meta"><strong>School:</strong> {{ spell.school }}</div>
                        {%- endif %}
                        {%- if spell.casting_time %}
                        <div class="spell-meta"><strong>Casting Time:</strong> {{ spell.casting_time }}</div>
                        {%- endif %}
                        {%- if spell.range %}
                        <div class="spell-meta"><strong>Range:</strong> {{ spell.range }}</div>
                        {%- endif %}
                        {%- if spell.components %}
                        <div class="spell-meta"><strong>Components:</strong> {{ spell.components }}</div>
                        {%- endif %}
                        {%- if spell.duration %}
                        <div class="spell-meta"><strong>Duration:</strong> {{ spell.duration }}</div>
                        {%- endif %}
                        {%- if spell.paragraphs %}
                        <div class="spell-description">{% for p in spell.paragraphs %}<p>{{ p }}</p>{% endfor %}</div>
                        {%- endif %}
                    </div>
                    {%- endfor %}
                </div>
                {%- endfor %}
            </div>
            {%- endif %}
        </div>
    </div>

    <script>{{ script }}</script>
</body>
</html>
"""

UPLOAD_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>FGU Character Sheet Generator</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'Book Antiqua', 'Palatino Linotype', Palatino, serif;
            background: linear-gradient(135deg, #f5f1e8 0%, #e8ddd4 100%);
            min-height: 100vh; display: flex; align-items: center; justify-content: center; padding: 20px;
        }
        .container {
            background: white; border: 3px solid #8b6914; border-radius: 8px; padding: 40px;
            max-width: 600px; width: 100%; box-shadow: 0 4px 20px rgba(0,0,0,0.2);
        }
        h1 { color: #8b6914; text-align: center; margin-bottom: 10px; font-size: 2em; }
        .subtitle { text-align: center; color: #666; margin-bottom: 30px; font-size: 0.95em; }
        .upload-area {
            border: 2px dashed #8b6914; border-radius: 6px; padding: 40px 20px; text-align: center;
            margin-bottom: 20px; cursor: pointer; transition: background 0.3s;
        }
        .upload-area:hover, .upload-area.dragover { background: #f5f1e8; }
        input[type="file"] { display: none; }
        button {
            background: #8b6914; color: white; border: none; padding: 12px 30px; font-size: 1em;
            border-radius: 4px; cursor: pointer; width: 100%; font-weight: bold;
        }
        button:hover { background: #6b5310; }
        button:disabled { opacity: 0.6; cursor: wait; }
        #fileName { margin: 10px 0; color: #2d7a2d; font-size: 0.9em; }
        .message { padding: 10px; border-radius: 4px; margin-bottom: 20px; display: none; }
        .message.error { color: #c12727; background: #ffe6e6; }
        .message.success { color: #2d7a2d; background: #e6ffe6; }
    </style>
</head>
<body>
    <div class="container">
        <h1>FGU Character Sheet Generator</h1>
        <p class="subtitle">Convert Fantasy Grounds Unity XML to HTML</p>

        <div class="message" id="message"></div>

        <form id="uploadForm" enctype="multipart/form-data">
            <div class="upload-area" id="uploadArea">
                <p><strong>Click to upload or drag &amp; drop</strong></p>
                <p style="font-size: 0.9em; color: #666; margin-top: 5px;">XML character file (max {{ max_mb }}MB)</p>
                <input type="file" id="fileInput" name="file" accept=".xml" required>
            </div>
            <div id="fileName"></div>
            <button type="submit">Generate Character Sheet</button>
        </form>
    </div>

    <script>
        const uploadArea = document.getElementById('uploadArea');
        const fileInput = document.getElementById('fileInput');
        const fileName = document.getElementById('fileName');
        const form = document.getElementById('uploadForm');
        const message = document.getElementById('message');

        function showMessage(text, kind) {
            message.textContent = text;
            message.className = 'message ' + kind;
            message.style.display = 'block';
        }

        function updateFileName() {
            fileName.textContent = fileInput.files.length > 0 ? fileInput.files[0].name : '';
        }

        uploadArea.addEventListener('click', () => fileInput.click());
        uploadArea.addEventListener('dragover', (e) => {
            e.preventDefault();
            uploadArea.classList.add('dragover');
        });
        uploadArea.addEventListener('dragleave', () => uploadArea.classList.remove('dragover'));
        uploadArea.addEventListener('drop', (e) => {
            e.preventDefault();
            uploadArea.classList.remove('dragover');
            fileInput.files = e.dataTransfer.files;
            updateFileName();
        });
        fileInput.addEventListener('change', updateFileName);

        form.addEventListener('submit', async (e) => {
            e.preventDefault();
            message.style.display = 'none';

            const formData = new FormData();
            formData.append('file', fileInput.files[0]);

            const button = form.querySelector('button');
            button.disabled = true;
            button.textContent = 'Generating...';

            try {
                const response = await fetch('{{ generate_url }}', { method: 'POST', body: formData });
                const data = await response.json();
                if (!response.ok || !data.success) {
                    throw new Error(data.error || 'Unknown error');
                }

                const blob = new Blob([data.html], { type: 'text/html' });
                const url = window.URL.createObjectURL(blob);
                const a = document.createElement('a');
                a.href = url;
                a.download = data.filename;
                document.body.appendChild(a);
                a.click();
                window.URL.revokeObjectURL(url);
                a.remove();
                showMessage('Generated sheet for ' + data.name, 'success');
            } catch (error) {
                showMessage('Error: ' + error.message, 'error');
            } finally {
                button.disabled = false;
                button.textContent = 'Generate Character Sheet';
            }
        });
    </script>
</body>
</html>
"""
