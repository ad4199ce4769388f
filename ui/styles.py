"""
CSS стили для AutoDash UI.

Светлая тема дашборда, KPI-карточки сеткой, синие акценты.
"""

CUSTOM_CSS = """
/* === Переменные === */
:root {
    --primary: #2563eb;
    --primary-dark: #1e3a5f;
    --success: #10b981;
    --info: #3b82f6;
    --bg-page: #fafbfc;
    --bg-card: #ffffff;
    --text-primary: #111827;
    --text-secondary: #6b7280;
    --border: #e5e7eb;
    --radius: 14px;
    --shadow: 0 4px 12px rgba(15, 23, 42, 0.08);
}

.gradio-container {
    background: var(--bg-page) !important;
    font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif !important;
}

h1 {
    font-size: 2rem !important;
    background: linear-gradient(135deg, var(--primary-dark), var(--primary)) !important;
    -webkit-background-clip: text !important;
    -webkit-text-fill-color: transparent !important;
    background-clip: text !important;
}

/* === KPI-карточки === */
.kpi-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
    gap: 20px;
}

.kpi-card {
    background: var(--bg-card);
    border: 1px solid var(--border);
    border-radius: var(--radius);
    box-shadow: var(--shadow);
    padding: 20px;
}

.kpi-label {
    color: var(--text-secondary);
    font-size: 0.8rem;
    font-weight: 700;
    text-transform: uppercase;
    letter-spacing: 0.05em;
}

.kpi-value {
    color: var(--text-primary);
    font-size: 1.75rem;
    font-weight: 800;
    margin-top: 8px;
}

.kpi-subtitle {
    color: var(--text-secondary);
    font-size: 0.85rem;
    margin-top: 4px;
}

/* === Кнопки === */
.primary-btn {
    background: linear-gradient(135deg, var(--primary-dark), var(--primary)) !important;
    border: none !important;
    border-radius: var(--radius) !important;
    color: white !important;
    font-weight: 600 !important;
}

/* === Загрузка файла === */
.file-upload {
    border: 2px dashed var(--border) !important;
    border-radius: var(--radius) !important;
}

.file-upload:hover {
    border-color: var(--primary) !important;
}

/* === Отчёт о качестве данных === */
.warnings-box {
    background: rgba(59, 130, 246, 0.08) !important;
    border: 1px solid var(--info) !important;
    border-radius: var(--radius) !important;
    padding: 16px 20px !important;
}
"""
