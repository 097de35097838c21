from __future__ import annotations

VIMRC = """\
" Basic config
set number
set relativenumber
set tabstop=4
set shiftwidth=4
set noexpandtab
set autoindent
set smartindent
set laststatus=2
set nowrap
syntax on
set mouse=a

" Autoload vim-plug
call plug#begin('~/.vim/plugged')

" Status-bar
Plug 'vim-airline/vim-airline'
Plug 'vim-airline/vim-airline-themes'

" Julia syntax highlighting
Plug 'JuliaEditorSupport/julia-vim'

" Nim syntax highlighting
Plug 'zah/nim.vim'

call plug#end()
"""

# Exit code of the last command in the prompt: red when non-zero.
BASHRC_PROMPT = r"""
PS1=$(
	EXIT_CODE=$?;
	if [ $EXIT_CODE -ne 0 ]; then
		EC="\[\e[91;1m\]$EXIT_CODE\[\e[0m\]";
	else
		EC="\[\e[32m\]0\[\e[0m\]";
	fi;
	echo -n "[\[\e[38;5;154m\]\u\[\e[0m\]@\[\e[38;5;200m\]\H\[\e[0m\] \[\e[38;5;45m\]\w\[\e[0m\]]-[${EC}]\[\e[38;5;154m\]\\$\[\e[0m\] "
)
"""
