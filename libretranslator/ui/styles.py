# libretranslator/ui/styles.py
"""
Stylesheet for the translator page.
"""

COMPLETE_CSS = """
.container {
    max-width: 1100px;
    margin: 0 auto;
    padding: 24px 16px;
}

.container h1 {
    font-size: 1.75rem;
    font-weight: 600;
    margin: 0 0 16px;
}

.language-auto-translate {
    display: flex;
    justify-content: space-between;
    align-items: center;
    gap: 16px;
}

.swap-button {
    font-size: 1.25rem;
    min-width: 48px;
}

.text-areas {
    display: grid;
    grid-template-columns: 1fr 1fr;
    gap: 16px;
}

@media (max-width: 720px) {
    .text-areas {
        grid-template-columns: 1fr;
    }
}

.info-bar {
    font-size: 0.85rem;
    color: #666;
}

.message {
    position: fixed;
    bottom: 24px;
    left: 50%;
    transform: translateX(-50%);
    padding: 8px 16px;
    border-radius: 6px;
    color: #fff;
}

.message.success {
    background: #2e7d32;
}

.message.error {
    background: #c62828;
}

.password-container {
    display: flex;
    gap: 8px;
    max-width: 420px;
}

.footer {
    margin-top: 32px;
    font-size: 0.8rem;
    color: #888;
}
"""
